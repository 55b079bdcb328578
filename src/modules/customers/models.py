"""Customer storage model for the database-backed repository.

The ORM row is a persistence detail: services and transports work with
``modules.customers.entities.Customer`` and the repository converts
between the two.  ``email`` is indexed but deliberately not unique;
uniqueness is checked by the Service Layer against the repository.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel
from modules.customers.entities import Customer


class CustomerRecord(TimestampedModel):
    """One stored customer row."""

    id = models.CharField(primary_key=True, max_length=64, editable=False)
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254)
    available_credit = models.FloatField(default=0)

    class Meta:
        db_table = "customers"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["email"], name="customers_email_idx"),
            models.Index(fields=["available_credit"], name="customers_credit_idx"),
        ]

    def to_entity(self) -> Customer:
        return Customer(
            id=self.id,
            name=self.name,
            email=self.email,
            available_credit=self.available_credit,
        )

    def apply(self, entity: Customer) -> None:
        """Copy the entity's mutable fields onto this row."""
        self.name = entity.name
        self.email = entity.email
        self.available_credit = entity.available_credit

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
