import pytest

from rest_framework.test import APIClient

from modules.customers.repositories import reset_customer_repository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _fresh_repository():
    """Each test starts with a new process-wide repository backend."""
    reset_customer_repository()
    yield
    reset_customer_repository()


@pytest.fixture()
def memory_backend(settings):
    """Switch the transports to the in-memory repository."""
    settings.CUSTOMER_REPOSITORY = "memory"
    reset_customer_repository()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid
