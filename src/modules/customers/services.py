"""Customer service layer (Use Cases).

Owns customer identity for the whole system, delegating persistence to the
injected ``ICustomerRepository``.

Business rules enforced here:
- IDN must be exactly 12 digits, re-checked on every call even though the
  shipment service validates first.
- Upsert is idempotent: the same IDN always yields the same customer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

from modules.customers.exceptions import CustomerNotFound, InvalidIDN
from modules.customers.validators import is_valid_idn

if TYPE_CHECKING:
    from modules.core.deadline import Deadline
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    No locking happens here: the repository's conditional write is the only
    thing that keeps concurrent upserts of one IDN from creating two rows.
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def upsert_by_idn(
        self, idn: str, deadline: Optional[Deadline] = None
    ) -> Customer:
        """Return the customer registered under *idn*, creating it if absent.

        Raises:
            InvalidIDN: *idn* is not exactly 12 digits.
            DeadlineExceeded: the request ran out of time before the write.
        """
        if not is_valid_idn(idn):
            logger.warning("customer.invalid_idn", operation="upsert")
            raise InvalidIDN()

        customer = self._repo.upsert_by_idn(idn, deadline=deadline)
        logger.info("customer.upsert_completed", customer_id=str(customer.id))
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_idn(self, idn: str, deadline: Optional[Deadline] = None) -> Customer:
        """Retrieve a single customer by IDN.

        Raises:
            InvalidIDN: *idn* is not exactly 12 digits.
            CustomerNotFound: no customer has this IDN.
        """
        if not is_valid_idn(idn):
            logger.warning("customer.invalid_idn", operation="get")
            raise InvalidIDN()

        customer = self._repo.get_by_idn(idn, deadline=deadline)
        if not customer:
            raise CustomerNotFound()
        logger.info("customer.retrieved", customer_id=str(customer.id))
        return customer
