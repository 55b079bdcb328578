"""Field-level and cross-entity validation rules for customers.

Kept apart from the ``Customer`` entity so the same rules run before an
entity exists (creation) and inside its setters (updates).  Each function
raises a ``CustomerError`` subclass instead of returning a boolean.

Rules enforced here:
- name: string, not blank, at least 3 characters.
- email: ``local@domain.tld`` shape, unique across the repository.
- credit: finite, non-negative number.
- sort order: ``asc`` or ``desc`` (``desc`` when omitted).
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any, Literal

from modules.customers.exceptions import (
    CustomerNotFound,
    EmailAlreadyInUse,
    EmptyName,
    InvalidEmailFormat,
    InvalidSortOrder,
    InvalidType,
    NameTooShort,
    NegativeCreditAmount,
)

if TYPE_CHECKING:
    from modules.customers.entities import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

SortOrder = Literal["asc", "desc"]

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_NAME_LENGTH = 3
DEFAULT_SORT_ORDER: SortOrder = "desc"


def validate_name(name: Any) -> None:
    """Type first, then emptiness (after trim), then length."""
    if not isinstance(name, str):
        raise InvalidType("name", "string", name)
    if not name.strip():
        raise EmptyName()
    if len(name) < MIN_NAME_LENGTH:
        raise NameTooShort()


def validate_email_format(email: Any) -> None:
    if not isinstance(email, str):
        raise InvalidType("email", "string", email)
    if not EMAIL_REGEX.match(email):
        raise InvalidEmailFormat()


def validate_email(email: Any, repository: ICustomerRepository) -> None:
    """Format checks, then uniqueness against the repository."""
    validate_email_format(email)
    if repository.find_by_email(email) is not None:
        raise EmailAlreadyInUse()


def validate_amount(amount: Any, property_name: str = "amount") -> None:
    """Accept finite ints and floats only (booleans are not amounts).

    Integers too large for a float count as non-finite.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidType(property_name, "number", amount)
    try:
        finite = math.isfinite(amount)
    except OverflowError:
        finite = False
    if not finite:
        raise InvalidType(property_name, "number", amount)


def validate_available_credit(
    amount: Any, property_name: str = "availableCredit"
) -> None:
    validate_amount(amount, property_name)
    if amount < 0:
        raise NegativeCreditAmount()


def validate_customer_exists(id: Any, repository: ICustomerRepository) -> Customer:
    """Ensure ``id`` is a string that matches a stored customer.

    Returns the loaded customer so callers may skip a second look-up.
    """
    if not isinstance(id, str):
        raise InvalidType("id", "string", id)
    customer = repository.find_by_id(id)
    if customer is None:
        raise CustomerNotFound()
    return customer


def validate_sort_order(order: Any) -> SortOrder:
    if order is None:
        return DEFAULT_SORT_ORDER
    if order in ("asc", "desc"):
        return order
    raise InvalidSortOrder()
