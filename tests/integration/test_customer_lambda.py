"""Integration tests for the API Gateway (Lambda) customer handlers.

The handlers share the service and error mapping with the HTTP views,
so these tests focus on event decoding and the proxy result shape.
"""

from __future__ import annotations

import json

import pytest

from modules.customers import lambda_handlers as handlers

pytestmark = pytest.mark.integration


def event(body=None, path=None, query=None):
    return {
        "body": None if body is None else json.dumps(body),
        "pathParameters": path,
        "queryStringParameters": query,
    }


def body_of(result):
    return json.loads(result["body"])


@pytest.fixture()
def customer():
    result = handlers.create(
        event({"name": "Valentino Rossi", "email": "valentino@example.com", "availableCredit": 100})
    )
    assert result["statusCode"] == 201
    return body_of(result)


# ===========================================================================
# Result shape
# ===========================================================================


class TestProxyResult:
    def test_json_content_type_header(self, customer):
        result = handlers.list_customers(event())
        assert result["headers"] == {"Content-Type": "application/json"}
        assert result["statusCode"] == 200
        assert body_of(result) == [customer]

    def test_delete_has_empty_body(self, customer):
        result = handlers.delete_customer(event(path={"id": customer["id"]}))
        assert result["statusCode"] == 204
        assert result["body"] == ""


# ===========================================================================
# Operations
# ===========================================================================


class TestHandlers:
    def test_create_defaults_credit(self):
        result = handlers.create(event({"name": "Marc Marquez", "email": "marc@example.com"}))
        assert result["statusCode"] == 201
        assert body_of(result)["availableCredit"] == 0

    def test_get_customer(self, customer):
        result = handlers.get_customer(event(path={"id": customer["id"]}))
        assert result["statusCode"] == 200
        assert body_of(result) == customer

    def test_get_customer_without_path_parameters(self):
        result = handlers.get_customer(event())
        assert result["statusCode"] == 400
        assert body_of(result) == {
            "error": "Invalid type for property id: expected string, but received null."
        }

    def test_update(self, customer):
        result = handlers.update(event({"name": "The Doctor"}, path={"id": customer["id"]}))
        assert result["statusCode"] == 200
        assert body_of(result)["name"] == "The Doctor"

    def test_add_credit(self, customer):
        result = handlers.add_credit(event({"id": customer["id"], "amount": 25}))
        assert result["statusCode"] == 200
        assert body_of(result)["availableCredit"] == 125

    def test_sort_by_credit(self, customer):
        handlers.create(event({"name": "Marc Marquez", "email": "marc@example.com", "availableCredit": 500}))
        result = handlers.sort_customers_by_credit(event(query={"order": "asc"}))
        assert [c["availableCredit"] for c in body_of(result)] == [100, 500]

    def test_sort_defaults_to_descending(self, customer):
        handlers.create(event({"name": "Marc Marquez", "email": "marc@example.com", "availableCredit": 500}))
        result = handlers.sort_customers_by_credit(event())
        assert [c["availableCredit"] for c in body_of(result)] == [500, 100]

    def test_min_credit(self, customer):
        result = handlers.min_credit(event(query={"amount": "150"}))
        assert result["statusCode"] == 200
        assert body_of(result) == []

    def test_api_docs(self):
        result = handlers.api_docs(event())
        assert result["statusCode"] == 200
        schema = body_of(result)
        assert schema["info"]["title"] == "Motorbike Shop API"
        assert "/customers" in schema["paths"]


# ===========================================================================
# Errors
# ===========================================================================


class TestHandlerErrors:
    def test_duplicate_email_returns_409(self, customer):
        result = handlers.create(event({"name": "Other Rider", "email": "valentino@example.com"}))
        assert result["statusCode"] == 409
        assert body_of(result) == {"error": "Email is already in use."}

    def test_negative_credit_returns_452(self, customer):
        result = handlers.add_credit(event({"id": customer["id"], "amount": -1}))
        assert result["statusCode"] == 452

    def test_unknown_customer_returns_404(self):
        result = handlers.delete_customer(event(path={"id": "nope"}))
        assert result["statusCode"] == 404
        assert body_of(result) == {"error": "Customer not found."}

    def test_invalid_sort_order_returns_400(self):
        result = handlers.sort_customers_by_credit(event(query={"order": "up"}))
        assert result["statusCode"] == 400

    def test_invalid_json_body_returns_400(self):
        result = handlers.create({"body": "{not json"})
        assert result["statusCode"] == 400
        assert body_of(result) == {"error": "Invalid JSON body."}

    def test_malformed_event_returns_400(self):
        result = handlers.create({"body": 42})
        assert result["statusCode"] == 400
        assert body_of(result) == {"error": "Invalid request event."}

    def test_api_docs_failure_returns_500(self, monkeypatch):
        def boom(self, request=None, public=False):
            raise RuntimeError("schema broken")

        monkeypatch.setattr(handlers.SchemaGenerator, "get_schema", boom)
        result = handlers.api_docs(event())
        assert result["statusCode"] == 500
        assert body_of(result) == {
            "error": "An error occurred when generating API docs: schema broken"
        }

    def test_unexpected_error_returns_500(self, monkeypatch):
        from modules.customers.services import CustomerService

        def boom(self):
            raise RuntimeError("storage offline")

        monkeypatch.setattr(CustomerService, "list", boom)
        result = handlers.list_customers(event())
        assert result["statusCode"] == 500
        assert body_of(result) == {
            "error": "An error occurred when retrieving customers: storage offline"
        }
