"""Lambda entry point: configure Django once per container, then expose handlers."""

import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
django.setup()

from modules.customers.lambda_handlers import (  # noqa: E402
    add_credit,
    api_docs,
    create,
    delete_customer,
    get_customer,
    list_customers,
    min_credit,
    sort_customers_by_credit,
    update,
)

__all__ = [
    "add_credit",
    "api_docs",
    "create",
    "delete_customer",
    "get_customer",
    "list_customers",
    "min_credit",
    "sort_customers_by_credit",
    "update",
]
