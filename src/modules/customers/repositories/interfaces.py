"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups required by the
email uniqueness rule and the minimum-credit query.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional, Union

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.entities import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""

    @abstractmethod
    def find_by_available_credit(
        self, min_credit: Union[int, float]
    ) -> List[Customer]:
        """Customers whose available credit is at least ``min_credit``."""
