"""Unit tests for the shared error translation helpers."""

from __future__ import annotations

import pytest
from rest_framework.exceptions import NotFound, ParseError

from modules.core.exceptions import (
    api_exception_handler,
    error_payload,
    error_response,
    is_custom_error,
)
from modules.customers.exceptions import (
    CustomerNotFound,
    EmailAlreadyInUse,
    NegativeCreditAmount,
)

pytestmark = pytest.mark.unit


class _DuckTypedError(Exception):
    status_code = 418
    message = "I'm a teapot."


class TestIsCustomError:
    def test_domain_errors(self):
        assert is_custom_error(CustomerNotFound())
        assert is_custom_error(NegativeCreditAmount())

    def test_any_object_with_status_and_message(self):
        assert is_custom_error(_DuckTypedError())

    def test_plain_exceptions(self):
        assert not is_custom_error(ValueError("boom"))

    def test_drf_exceptions_lack_message(self):
        assert not is_custom_error(ParseError())


class TestErrorPayload:
    def test_domain_error_keeps_status_and_message(self):
        assert error_payload(EmailAlreadyInUse(), "ctx:") == (
            409,
            {"error": "Email is already in use."},
        )

    def test_custom_452_status(self):
        status_code, _ = error_payload(NegativeCreditAmount(), "ctx:")
        assert status_code == 452

    def test_unexpected_error_is_500_with_context(self):
        status_code, body = error_payload(
            RuntimeError("disk on fire"), "An error occurred when creating customer:"
        )
        assert status_code == 500
        assert body == {
            "error": "An error occurred when creating customer: disk on fire"
        }

    def test_error_response_wraps_payload(self):
        response = error_response(CustomerNotFound(), "ctx:")
        assert response.status_code == 404
        assert response.data == {"error": "Customer not found."}


class TestApiExceptionHandler:
    def test_reshapes_drf_detail(self):
        response = api_exception_handler(ParseError("bad json"), {})
        assert response.status_code == 400
        assert response.data == {"error": "bad json"}

    def test_keeps_drf_status(self):
        response = api_exception_handler(NotFound(), {})
        assert response.status_code == 404
        assert "error" in response.data

    def test_non_drf_exception_is_left_to_django(self):
        assert api_exception_handler(ValueError("boom"), {}) is None
