"""In-memory implementation of the Customer repository.

Keeps customers in a plain list, so iteration order is insertion order.
Used by the standalone server when ``CUSTOMER_REPOSITORY=memory`` and
by tests that do not need a database.
"""

from __future__ import annotations

from typing import List, Optional, Union

import structlog

from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerNotFound
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class InMemoryCustomerRepository(ICustomerRepository):
    """Concrete Customer repository backed by a Python list."""

    def __init__(self) -> None:
        self._customers: List[Customer] = []

    def create(self, entity: Customer) -> Customer:
        self._customers.append(entity)
        logger.info("customer.saved", customer_id=entity.id, is_new=True)
        return entity

    def find_all(self) -> List[Customer]:
        return list(self._customers)

    def find_by_id(self, id: str) -> Optional[Customer]:
        return next((c for c in self._customers if c.id == id), None)

    def find_by_email(self, email: str) -> Optional[Customer]:
        return next((c for c in self._customers if c.email == email), None)

    def update(self, entity: Customer) -> Customer:
        """Replace the stored customer with the same id.

        Raises:
            CustomerNotFound: if no customer has that id.
        """
        for index, current in enumerate(self._customers):
            if current.id == entity.id:
                self._customers[index] = entity
                logger.info("customer.saved", customer_id=entity.id, is_new=False)
                return entity
        raise CustomerNotFound()

    def delete(self, id: str) -> None:
        """Remove the customer; unknown ids are ignored."""
        self._customers = [c for c in self._customers if c.id != id]

    def find_by_available_credit(
        self, min_credit: Union[int, float]
    ) -> List[Customer]:
        return [c for c in self._customers if c.available_credit >= min_credit]

    def clear(self) -> None:
        self._customers = []
