"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API and hands
``Customer`` entities (never ORM rows) back to the Service Layer.
Look-ups follow the Null Object pattern: they return ``None`` instead of
raising, and the Service Layer decides how to report a missing customer.
"""

from __future__ import annotations

from typing import List, Optional, Union

import structlog

from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import CustomerRecord
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def create(self, entity: Customer) -> Customer:
        record = CustomerRecord(id=entity.id)
        record.apply(entity)
        record.save(force_insert=True)
        logger.info("customer.saved", customer_id=entity.id, is_new=True)
        return entity

    def find_all(self) -> List[Customer]:
        return [record.to_entity() for record in CustomerRecord.objects.all()]

    def find_by_id(self, id: str) -> Optional[Customer]:
        record = CustomerRecord.objects.filter(id=id).first()
        return record.to_entity() if record else None

    def find_by_email(self, email: str) -> Optional[Customer]:
        record = CustomerRecord.objects.filter(email=email).first()
        return record.to_entity() if record else None

    def update(self, entity: Customer) -> Customer:
        """Write the entity's fields over the stored row.

        Raises:
            CustomerNotFound: if the row no longer exists.
        """
        record = CustomerRecord.objects.filter(id=entity.id).first()
        if record is None:
            raise CustomerNotFound()
        record.apply(entity)
        record.save(update_fields=["name", "email", "available_credit"])
        logger.info("customer.saved", customer_id=entity.id, is_new=False)
        return entity

    def delete(self, id: str) -> None:
        deleted, _ = CustomerRecord.objects.filter(id=id).delete()
        if deleted:
            logger.info("customer.row_deleted", customer_id=id)

    def find_by_available_credit(
        self, min_credit: Union[int, float]
    ) -> List[Customer]:
        queryset = CustomerRecord.objects.filter(available_credit__gte=min_credit)
        return [record.to_entity() for record in queryset]

    def clear(self) -> None:
        CustomerRecord.objects.all().delete()
