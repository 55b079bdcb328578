"""Customer aggregate.

Framework-agnostic entity holding validated state.  Every mutation path
re-runs the matching validator, so an instance never holds an invalid
name, a malformed email or negative credit.  Email *uniqueness* depends
on the repository and is enforced by the Service Layer instead.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from modules.customers.validators import (
    validate_available_credit,
    validate_email_format,
    validate_name,
)

Number = Union[int, float]


class Customer:
    """Customer aggregate root (id, name, email, available credit)."""

    def __init__(
        self,
        id: str,
        name: str,
        email: str,
        available_credit: Number = 0,
    ) -> None:
        validate_name(name)
        validate_email_format(email)
        validate_available_credit(available_credit)

        self._id = id
        self._name = name
        self._email = email
        self._available_credit = available_credit

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    # ------------------------------------------------------------------
    # Validated fields
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        validate_name(value)
        self._name = value

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        validate_email_format(value)
        self._email = value

    @property
    def available_credit(self) -> Number:
        return self._available_credit

    @available_credit.setter
    def available_credit(self, value: Number) -> None:
        validate_available_credit(value)
        self._available_credit = value

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def add_credit(self, amount: Number) -> None:
        """Increase credit by a non-negative ``amount`` (zero is a no-op).

        The total must stay a finite number; an overflowing sum raises
        ``InvalidType`` and leaves the credit unchanged.
        """
        validate_available_credit(amount, "amount")
        new_credit = self._available_credit + amount
        validate_available_credit(new_credit)
        self._available_credit = new_credit

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "name": self._name,
            "email": self._email,
            "availableCredit": self._available_credit,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # mutable entity

    def __repr__(self) -> str:
        return f"Customer(id={self._id!r}, name={self._name!r})"
