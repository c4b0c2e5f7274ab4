"""Shipment repository interface.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

if TYPE_CHECKING:
    from modules.core.deadline import Deadline
    from modules.shipments.models import Shipment


class IShipmentRepository(ABC):
    """Repository contract for shipments (insert and read by id only)."""

    @abstractmethod
    def create(
        self,
        route: str,
        price: Decimal,
        customer_id: UUID,
        deadline: Optional[Deadline] = None,
    ) -> Shipment:
        """Insert a shipment in status ``CREATED`` and return it."""

    @abstractmethod
    def get_by_id(
        self, id: UUID, deadline: Optional[Deadline] = None
    ) -> Optional[Shipment]:
        """Retrieve a shipment by id, ``None`` when absent."""
