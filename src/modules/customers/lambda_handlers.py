"""Customer handlers for AWS Lambda (API Gateway proxy integration).

Each public function receives the raw proxy ``event`` and the Lambda
``context`` and returns a proxy result dict.  Business logic and error
mapping are shared with the HTTP views: the same ``CustomerService``,
the same ``{"error": message}`` body, the same status codes.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

import structlog
from django.core.serializers.json import DjangoJSONEncoder
from drf_spectacular.generators import SchemaGenerator
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import error_payload
from modules.customers.dtos import (
    AddCreditDTO,
    ApiGatewayEvent,
    CreateCustomerDTO,
    CustomerOutputDTO,
    UpdateCustomerDTO,
    query_number,
)
from modules.customers.entities import Customer
from modules.customers.repositories import get_customer_repository
from modules.customers.services import CustomerService

logger = structlog.get_logger(__name__)

ProxyResult = Dict[str, Any]

JSON_HEADERS = {"Content-Type": "application/json"}


class InvalidEvent(Exception):
    """The proxy event (or its body) could not be decoded."""


def _result(status_code: int, body: Any = None) -> ProxyResult:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": "" if body is None else json.dumps(body, cls=DjangoJSONEncoder),
    }


def _service() -> CustomerService:
    return CustomerService(repository=get_customer_repository())


def _parse(event: Any) -> ApiGatewayEvent:
    try:
        return ApiGatewayEvent.model_validate(event or {})
    except PydanticValidationError as exc:
        raise InvalidEvent("Invalid request event.") from exc


def _body(parsed: ApiGatewayEvent) -> Any:
    try:
        return parsed.json_body()
    except ValueError as exc:
        raise InvalidEvent("Invalid JSON body.") from exc


def _serialize(customers: List[Customer]) -> List[dict]:
    return [CustomerOutputDTO.from_entity(c).to_wire() for c in customers]


def _handle(context_message: str, operation: Callable[[], ProxyResult]) -> ProxyResult:
    try:
        return operation()
    except InvalidEvent as exc:
        logger.warning("lambda.invalid_event", error=str(exc))
        return _result(400, {"error": str(exc)})
    except Exception as exc:
        status_code, body = error_payload(exc, context_message)
        return _result(status_code, body)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def create(event: Any, context: Any = None) -> ProxyResult:
    """POST /customers"""

    def operation() -> ProxyResult:
        dto = CreateCustomerDTO.from_payload(_body(_parse(event)))
        customer = _service().create(dto.name, dto.email, dto.available_credit)
        return _result(201, CustomerOutputDTO.from_entity(customer).to_wire())

    return _handle("An error occurred when creating customer:", operation)


def list_customers(event: Any, context: Any = None) -> ProxyResult:
    """GET /customers"""
    return _handle(
        "An error occurred when retrieving customers:",
        lambda: _result(200, _serialize(_service().list())),
    )


def get_customer(event: Any, context: Any = None) -> ProxyResult:
    """GET /customers/{id}"""

    def operation() -> ProxyResult:
        customer_id = _parse(event).path_parameters.get("id")
        customer = _service().find_by_id(customer_id)
        return _result(200, CustomerOutputDTO.from_entity(customer).to_wire())

    return _handle("An error occurred when retrieving customer:", operation)


def update(event: Any, context: Any = None) -> ProxyResult:
    """PUT /customers/{id}"""

    def operation() -> ProxyResult:
        parsed = _parse(event)
        dto = UpdateCustomerDTO.from_payload(_body(parsed))
        customer = _service().update(
            parsed.path_parameters.get("id"),
            name=dto.name,
            email=dto.email,
            available_credit=dto.available_credit,
        )
        return _result(200, CustomerOutputDTO.from_entity(customer).to_wire())

    return _handle("An error occurred when updating customer:", operation)


def delete_customer(event: Any, context: Any = None) -> ProxyResult:
    """DELETE /customers/{id}"""

    def operation() -> ProxyResult:
        _service().delete(_parse(event).path_parameters.get("id"))
        return _result(204)

    return _handle("An error occurred when deleting customer:", operation)


def add_credit(event: Any, context: Any = None) -> ProxyResult:
    """POST /customers/credit"""

    def operation() -> ProxyResult:
        dto = AddCreditDTO.from_payload(_body(_parse(event)))
        customer = _service().add_credit(dto.id, dto.amount)
        return _result(200, CustomerOutputDTO.from_entity(customer).to_wire())

    return _handle("An error occurred when adding credit:", operation)


def sort_customers_by_credit(event: Any, context: Any = None) -> ProxyResult:
    """GET /customers/sortByCredit?order=asc|desc"""

    def operation() -> ProxyResult:
        order = _parse(event).query_string_parameters.get("order")
        return _result(200, _serialize(_service().sort_customers_by_credit(order)))

    return _handle("An error occurred while sorting customers by credit:", operation)


def min_credit(event: Any, context: Any = None) -> ProxyResult:
    """GET /customers/minCredit?amount=N"""

    def operation() -> ProxyResult:
        amount = query_number(_parse(event).query_string_parameters.get("amount"))
        return _result(200, _serialize(_service().find_by_minimum_credit(amount)))

    return _handle("An error occurred when filtering customers by credit:", operation)


def api_docs(event: Any, context: Any = None) -> ProxyResult:
    """GET /api-docs: the OpenAPI schema as JSON."""
    return _handle(
        "An error occurred when generating API docs:",
        lambda: _result(200, SchemaGenerator().get_schema(request=None, public=True)),
    )
