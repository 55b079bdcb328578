"""Customer DTOs shared by the HTTP and Lambda transports.

Framework-agnostic data transfer objects using Pydantic v2.  Input DTOs
only map wire names (``availableCredit``) onto service arguments and
keep values *as received*: type checking belongs to the validators,
which report ``InvalidType`` with the received JSON type.  DTOs are
immutable (``frozen=True``).

- ``CreateCustomerDTO`` / ``UpdateCustomerDTO`` / ``AddCreditDTO``: inputs.
- ``CustomerOutputDTO``: wire representation of a ``Customer``.
- ``ApiGatewayEvent``: the parts of an API Gateway proxy event we read.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.customers.entities import Customer

# Largest magnitude below which every integral float is an exact integer.
MAX_EXACT_INT = 2**53


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class _InputDTO(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_payload(cls, payload: Any):
        """Build from a decoded JSON body; non-objects count as empty."""
        return cls.model_validate(payload if isinstance(payload, dict) else {})


class CreateCustomerDTO(_InputDTO):
    """Body of ``POST /customers``; ``availableCredit`` is optional."""

    name: Any = None
    email: Any = None
    available_credit: Any = Field(default=None, alias="availableCredit")


class UpdateCustomerDTO(_InputDTO):
    """Body of ``PUT /customers/<id>``.

    All fields are optional; only supplied fields will be updated.
    """

    name: Any = None
    email: Any = None
    available_credit: Any = Field(default=None, alias="availableCredit")


class AddCreditDTO(_InputDTO):
    """Body of ``POST /customers/credit``."""

    id: Any = None
    amount: Any = None


def query_number(raw: Any) -> Any:
    """Read a numeric query-string value.

    Query parameters arrive as text; anything that is not a number is
    returned unchanged so the validators report it.
    """
    try:
        return float(raw)
    except (TypeError, ValueError):
        return raw


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerOutputDTO(BaseModel):
    """Immutable DTO for customer API responses."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    email: str
    available_credit: Union[int, float] = Field(alias="availableCredit")

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        """Build an output DTO from a Customer entity."""
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            available_credit=customer.available_credit,
        )

    @field_validator("available_credit")
    @classmethod
    def whole_numbers_as_int(cls, v: Union[int, float]) -> Union[int, float]:
        """Render ``200.0`` as ``200`` whichever backend produced it."""
        if isinstance(v, float) and v.is_integer() and abs(v) <= MAX_EXACT_INT:
            return int(v)
        return v

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Lambda event
# ---------------------------------------------------------------------------


class ApiGatewayEvent(BaseModel):
    """API Gateway proxy event (the fields the handlers read)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    body: Optional[str] = None
    path_parameters: Dict[str, str] = Field(default_factory=dict, alias="pathParameters")
    query_string_parameters: Dict[str, str] = Field(
        default_factory=dict, alias="queryStringParameters"
    )

    @field_validator("path_parameters", "query_string_parameters", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """API Gateway sends ``null`` when there are no parameters."""
        return {} if v is None else v

    def json_body(self) -> Any:
        """Decode ``body``; an absent body decodes to ``{}``.

        Raises:
            ValueError: if the body is not valid JSON.
        """
        if not self.body:
            return {}
        return json.loads(self.body)
