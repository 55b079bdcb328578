"""Unit tests for Customer DTOs.

Covers:
- Input DTOs: wire aliases, raw values kept, non-object payloads, frozen.
- CustomerOutputDTO: from_entity factory and wire names.
- ApiGatewayEvent: null parameters, JSON body decoding.
- query_number: numeric query-string parsing.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.customers.dtos import (
    AddCreditDTO,
    ApiGatewayEvent,
    CreateCustomerDTO,
    CustomerOutputDTO,
    UpdateCustomerDTO,
    query_number,
)
from modules.customers.entities import Customer

pytestmark = pytest.mark.unit


# ===========================================================================
# Input DTOs
# ===========================================================================


class TestCreateCustomerDTO:
    def test_maps_wire_alias(self):
        dto = CreateCustomerDTO.from_payload(
            {"name": "Rider", "email": "r@example.com", "availableCredit": 10}
        )
        assert dto.name == "Rider"
        assert dto.email == "r@example.com"
        assert dto.available_credit == 10

    def test_missing_credit_is_none(self):
        dto = CreateCustomerDTO.from_payload({"name": "Rider", "email": "r@example.com"})
        assert dto.available_credit is None

    def test_keeps_values_as_received(self):
        dto = CreateCustomerDTO.from_payload({"name": 123, "availableCredit": "10"})
        assert dto.name == 123
        assert dto.available_credit == "10"

    def test_non_object_payload_is_empty(self):
        dto = CreateCustomerDTO.from_payload(["not", "an", "object"])
        assert dto.name is None
        assert dto.email is None

    def test_ignores_unknown_fields(self):
        dto = CreateCustomerDTO.from_payload({"name": "Rider", "role": "admin"})
        assert not hasattr(dto, "role")

    def test_is_immutable(self):
        dto = CreateCustomerDTO.from_payload({"name": "Rider"})
        with pytest.raises(ValidationError):
            dto.name = "Changed"


class TestUpdateCustomerDTO:
    def test_all_fields_optional(self):
        dto = UpdateCustomerDTO.from_payload({})
        assert (dto.name, dto.email, dto.available_credit) == (None, None, None)


class TestAddCreditDTO:
    def test_reads_id_and_amount(self):
        dto = AddCreditDTO.from_payload({"id": "abc", "amount": 50})
        assert dto.id == "abc"
        assert dto.amount == 50


# ===========================================================================
# CustomerOutputDTO
# ===========================================================================


class TestCustomerOutputDTO:
    def test_from_entity_uses_wire_names(self):
        customer = Customer("abc", "Rider One", "one@example.com", 75)
        wire = CustomerOutputDTO.from_entity(customer).to_wire()
        assert wire == {
            "id": "abc",
            "name": "Rider One",
            "email": "one@example.com",
            "availableCredit": 75,
        }

    def test_preserves_float_credit(self):
        customer = Customer("abc", "Rider One", "one@example.com", 12.5)
        assert CustomerOutputDTO.from_entity(customer).available_credit == 12.5

    def test_whole_float_credit_rendered_as_int(self):
        customer = Customer("abc", "Rider One", "one@example.com", 200.0)
        wire = CustomerOutputDTO.from_entity(customer).to_wire()
        assert wire["availableCredit"] == 200
        assert isinstance(wire["availableCredit"], int)

    def test_huge_whole_float_kept_as_float(self):
        customer = Customer("abc", "Rider One", "one@example.com", 1e300)
        assert isinstance(CustomerOutputDTO.from_entity(customer).available_credit, float)


# ===========================================================================
# query_number
# ===========================================================================


class TestQueryNumber:
    @pytest.mark.parametrize("raw, expected", [("100", 100.0), ("12.5", 12.5), ("-1", -1.0)])
    def test_parses_numeric_text(self, raw, expected):
        assert query_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, "abc", ""])
    def test_leaves_non_numbers_unchanged(self, raw):
        assert query_number(raw) == raw


# ===========================================================================
# ApiGatewayEvent
# ===========================================================================


class TestApiGatewayEvent:
    def test_null_parameters_become_empty(self):
        event = ApiGatewayEvent.model_validate(
            {"pathParameters": None, "queryStringParameters": None}
        )
        assert event.path_parameters == {}
        assert event.query_string_parameters == {}

    def test_reads_parameters(self):
        event = ApiGatewayEvent.model_validate(
            {"pathParameters": {"id": "abc"}, "queryStringParameters": {"order": "asc"}}
        )
        assert event.path_parameters["id"] == "abc"
        assert event.query_string_parameters["order"] == "asc"

    def test_json_body(self):
        event = ApiGatewayEvent.model_validate({"body": '{"name": "Rider"}'})
        assert event.json_body() == {"name": "Rider"}

    def test_missing_body_is_empty_object(self):
        assert ApiGatewayEvent.model_validate({}).json_body() == {}

    def test_invalid_json_raises_value_error(self):
        event = ApiGatewayEvent.model_validate({"body": "{"})
        with pytest.raises(ValueError):
            event.json_body()
