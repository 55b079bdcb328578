"""Customer repositories package.

``get_customer_repository()`` returns the backend selected by the
``CUSTOMER_REPOSITORY`` setting.  The in-memory backend is shared by the
whole process so every request sees the same customers.
"""

from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.repositories.in_memory import InMemoryCustomerRepository
from modules.customers.repositories.interfaces import ICustomerRepository

BACKENDS = {
    "memory": InMemoryCustomerRepository,
    "database": CustomerDjangoRepository,
}


@lru_cache(maxsize=None)
def _build_repository(backend: str) -> ICustomerRepository:
    try:
        repository_class = BACKENDS[backend]
    except KeyError:
        raise ImproperlyConfigured(
            f"Unknown CUSTOMER_REPOSITORY {backend!r}; "
            f"expected one of {sorted(BACKENDS)}."
        ) from None
    return repository_class()


def get_customer_repository() -> ICustomerRepository:
    return _build_repository(settings.CUSTOMER_REPOSITORY)


def reset_customer_repository() -> None:
    """Drop cached backends (tests switching ``CUSTOMER_REPOSITORY``)."""
    _build_repository.cache_clear()


__all__ = [
    "CustomerDjangoRepository",
    "ICustomerRepository",
    "InMemoryCustomerRepository",
    "get_customer_repository",
    "reset_customer_repository",
]
