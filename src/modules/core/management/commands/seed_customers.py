from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.exceptions import EmailAlreadyInUse
from modules.customers.repositories import get_customer_repository
from modules.customers.services import CustomerService

SEED_CUSTOMERS = [
    ("Valentino Rossi", "valentino@example.com", 4600),
    ("Marc Marquez", "marc@example.com", 9300),
    ("Jorge Lorenzo", "jorge@example.com", 1250.5),
    ("Casey Stoner", "casey@example.com", 2700),
    ("Dani Pedrosa", "dani@example.com", 0),
    ("Wayne Rainey", "wayne@example.com", 150),
    ("Kevin Schwantz", "kevin@example.com", 150),
    ("Mick Doohan", "mick@example.com", 5000),
]


class Command(BaseCommand):
    help = "Seed the customer repository with development data."

    def handle(self, *args, **options):
        self.stdout.write("Creating customers...")
        service = CustomerService(repository=get_customer_repository())

        created = 0
        skipped = 0
        for name, email, credit in SEED_CUSTOMERS:
            try:
                service.create(name, email, credit)
            except EmailAlreadyInUse:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: customers={created}, skipped={skipped}"
            )
        )
