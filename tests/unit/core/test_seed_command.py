from io import StringIO

import pytest
from django.core.management import call_command

from modules.core.management.commands.seed_customers import SEED_CUSTOMERS
from modules.customers.models import CustomerRecord

pytestmark = pytest.mark.unit


def run_seed():
    out = StringIO()
    call_command("seed_customers", stdout=out)
    return out.getvalue()


class TestSeedCustomersCommand:
    def test_creates_all_customers(self):
        output = run_seed()
        assert CustomerRecord.objects.count() == len(SEED_CUSTOMERS)
        assert f"customers={len(SEED_CUSTOMERS)}, skipped=0" in output

    def test_is_idempotent(self):
        run_seed()
        output = run_seed()
        assert CustomerRecord.objects.count() == len(SEED_CUSTOMERS)
        assert f"customers=0, skipped={len(SEED_CUSTOMERS)}" in output

    def test_respects_configured_backend(self, memory_backend):
        from modules.customers.repositories import get_customer_repository

        run_seed()
        assert CustomerRecord.objects.count() == 0
        assert len(get_customer_repository().find_all()) == len(SEED_CUSTOMERS)
