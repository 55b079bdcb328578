"""Customer service layer (Use Cases).

Orchestrates validation and persistence for the Customer aggregate,
delegating storage to the injected ``ICustomerRepository``.  The service
owns *when* each validation rule fires; the rules themselves live in
``modules.customers.validators``.

Validation order is the same for every use case: name, then email,
then credit.  The service keeps no state between calls; every operation
re-reads the repository.  Uniqueness checks and writes are not atomic,
so two concurrent creations with the same email may both succeed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

import structlog
import uuid6

from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerNotFound
from modules.customers.validators import (
    validate_available_credit,
    validate_customer_exists,
    validate_email,
    validate_name,
    validate_sort_order,
)

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    @staticmethod
    def _generate_id() -> str:
        return uuid6.uuid7().hex

    def _load(self, id: Any) -> Customer:
        validate_customer_exists(id, self._repo)
        customer = self._repo.find_by_id(id)
        if customer is None:
            raise CustomerNotFound()
        return customer

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(
        self, name: Any, email: Any, available_credit: Any = None
    ) -> Customer:
        """Create a new customer after validating every field.

        ``available_credit`` defaults to 0 when omitted.

        Raises:
            InvalidType, EmptyName, NameTooShort: bad name.
            InvalidType, InvalidEmailFormat, EmailAlreadyInUse: bad email.
            InvalidType, NegativeCreditAmount: bad credit.
        """
        if available_credit is None:
            available_credit = 0

        validate_name(name)
        validate_email(email, self._repo)
        validate_available_credit(available_credit)

        customer = Customer(
            id=self._generate_id(),
            name=name,
            email=email,
            available_credit=available_credit,
        )
        self._repo.create(customer)
        logger.info("customer.created", customer_id=customer.id, email=email)
        return customer

    def update(
        self,
        id: Any,
        name: Any = None,
        email: Any = None,
        available_credit: Any = None,
    ) -> Customer:
        """Update the supplied fields of an existing customer.

        ``None`` means "leave unchanged".  Every supplied field is
        validated before any is applied; the email uniqueness check is
        skipped when the email does not change.

        Raises:
            CustomerNotFound: if the customer does not exist.
            EmailAlreadyInUse: if the new email belongs to someone else.
        """
        customer = self._load(id)
        log = logger.bind(customer_id=customer.id)

        if name is not None:
            validate_name(name)
        if email is not None and email != customer.email:
            validate_email(email, self._repo)
        if available_credit is not None:
            validate_available_credit(available_credit)

        changed = []
        if name is not None and name != customer.name:
            customer.name = name
            changed.append("name")
        if email is not None and email != customer.email:
            customer.email = email
            changed.append("email")
        if available_credit is not None and available_credit != customer.available_credit:
            customer.available_credit = available_credit
            changed.append("available_credit")

        customer = self._repo.update(customer)
        log.info("customer.updated", changed_fields=changed)
        return customer

    def delete(self, id: Any) -> None:
        """Delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        validate_customer_exists(id, self._repo)
        self._repo.delete(id)
        logger.info("customer.deleted", customer_id=id)

    def add_credit(self, id: Any, amount: Any) -> Customer:
        """Add a non-negative ``amount`` to the customer's credit.

        Raises:
            CustomerNotFound: if the customer does not exist.
            InvalidType: if ``amount`` is not a finite number.
            NegativeCreditAmount: if ``amount`` is below zero.
        """
        customer = self._load(id)
        customer.add_credit(amount)
        customer = self._repo.update(customer)
        logger.info(
            "customer.credit_added",
            customer_id=customer.id,
            amount=amount,
            available_credit=customer.available_credit,
        )
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[Customer]:
        """Return every customer in repository order."""
        return self._repo.find_all()

    def find_by_id(self, id: Any) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._load(id)
        logger.info("customer.retrieved", customer_id=customer.id)
        return customer

    def sort_customers_by_credit(self, order: Optional[str] = None) -> List[Customer]:
        """Customers ordered by available credit (``desc`` by default).

        The sort is stable: customers with equal credit keep repository
        order in both directions.

        Raises:
            InvalidSortOrder: if ``order`` is not ``asc`` or ``desc``.
        """
        order = validate_sort_order(order)
        customers = self._repo.find_all()
        return sorted(
            customers,
            key=lambda customer: customer.available_credit,
            reverse=order == "desc",
        )

    def find_by_minimum_credit(self, min_credit: Any) -> List[Customer]:
        """Customers whose available credit is at least ``min_credit``.

        Raises:
            InvalidType: if ``min_credit`` is not a finite number.
            NegativeCreditAmount: if ``min_credit`` is below zero.
        """
        validate_available_credit(min_credit, "amount")
        return self._repo.find_by_available_credit(min_credit)
