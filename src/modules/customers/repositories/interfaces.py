"""Customer repository interface.

The registry needs exactly two persistence primitives: an atomic
insert-or-return-existing keyed by IDN, and a look-up by IDN.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.core.deadline import Deadline
    from modules.customers.models import Customer


class ICustomerRepository(ABC):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def upsert_by_idn(
        self, idn: str, deadline: Optional[Deadline] = None
    ) -> Customer:
        """Insert a customer for *idn*, or return the one already stored.

        Must be a single conditional write resolved by the database's
        unique constraint on ``idn``.
        """

    @abstractmethod
    def get_by_idn(
        self, idn: str, deadline: Optional[Deadline] = None
    ) -> Optional[Customer]:
        """Retrieve a customer by IDN, ``None`` when absent."""
