"""Customer domain exceptions.

Raised by the validators, the ``Customer`` entity and the Service Layer
when business rules are violated.  Every exception carries the HTTP
``status_code`` the transports answer with and a fixed ``message``; the
API layer (Views, Lambda handlers) translates them into responses.
"""

from __future__ import annotations

from typing import Any


def json_type_name(value: Any) -> str:
    """Name the JSON type of ``value`` (``null``, ``number``...)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class CustomerError(Exception):
    """Base class for every customer rule violation."""

    status_code: int = 400
    default_message: str = "Invalid customer data."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidType(CustomerError):
    """A field was received with the wrong runtime type."""

    def __init__(self, property_name: str, expected_type: str, received_value: Any) -> None:
        self.property_name = property_name
        self.expected_type = expected_type
        self.received_type = json_type_name(received_value)
        super().__init__(
            f"Invalid type for property {property_name}: expected "
            f"{expected_type}, but received {self.received_type}."
        )


class EmptyName(CustomerError):
    default_message = "Name cannot be empty."


class NameTooShort(CustomerError):
    default_message = "Name must be at least 3 characters long."


class InvalidEmailFormat(CustomerError):
    default_message = "Invalid email format."


class EmailAlreadyInUse(CustomerError):
    """Another customer already owns the email address."""

    status_code = 409
    default_message = "Email is already in use."


class CustomerNotFound(CustomerError):
    """The requested customer does not exist."""

    status_code = 404
    default_message = "Customer not found."


class NegativeCreditAmount(CustomerError):
    """Credit (or a credit delta) below zero.

    Answered with the shop's custom 452 status code.
    """

    status_code = 452
    default_message = "Credit amount cannot be negative."


class InvalidSortOrder(CustomerError):
    default_message = "Invalid sort order. Use 'asc' or 'desc'."
