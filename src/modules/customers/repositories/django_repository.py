"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: a missing customer is ``None``,
the Service Layer decides how to report it.  Database errors propagate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

from modules.core.db import bounded_atomic
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

if TYPE_CHECKING:
    from modules.core.deadline import Deadline

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def upsert_by_idn(
        self, idn: str, deadline: Optional[Deadline] = None
    ) -> Customer:
        """Insert-or-return-existing in one statement.

        Compiles to ``INSERT ... ON CONFLICT (idn) DO UPDATE SET idn =
        EXCLUDED.idn``: concurrent upserts of a new IDN race inside the
        database and exactly one row wins.  The row is then read back so the
        caller always sees the stored ``id`` and ``created_at``, not the
        candidate values generated for the losing insert.
        """
        with bounded_atomic(deadline, "customer.repo.upsert_by_idn"):
            Customer.objects.bulk_create(
                [Customer(idn=idn)],
                update_conflicts=True,
                unique_fields=["idn"],
                update_fields=["idn"],
            )
            customer = Customer.objects.get(idn=idn)

        logger.info("customer.upserted", customer_id=str(customer.id))
        return customer

    def get_by_idn(
        self, idn: str, deadline: Optional[Deadline] = None
    ) -> Optional[Customer]:
        """Retrieve a customer by IDN (digits only)."""
        with bounded_atomic(deadline, "customer.repo.get_by_idn"):
            return Customer.objects.filter(idn=idn).first()
