"""Django ORM implementation of the Shipment repository."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

import structlog

from modules.core.db import bounded_atomic
from modules.shipments.constants import ShipmentStatus
from modules.shipments.models import Shipment
from modules.shipments.repositories.interfaces import IShipmentRepository

if TYPE_CHECKING:
    from modules.core.deadline import Deadline

logger = structlog.get_logger(__name__)


class ShipmentDjangoRepository(IShipmentRepository):
    """Concrete Shipment repository backed by Django ORM."""

    def create(
        self,
        route: str,
        price: Decimal,
        customer_id: UUID,
        deadline: Optional[Deadline] = None,
    ) -> Shipment:
        with bounded_atomic(deadline, "shipment.repo.create"):
            shipment = Shipment.objects.create(
                route=route,
                price=price,
                status=ShipmentStatus.CREATED,
                customer_id=customer_id,
            )

        logger.info(
            "shipment.inserted",
            shipment_id=str(shipment.id),
            customer_id=str(customer_id),
        )
        return shipment

    def get_by_id(
        self, id: UUID, deadline: Optional[Deadline] = None
    ) -> Optional[Shipment]:
        with bounded_atomic(deadline, "shipment.repo.get_by_id"):
            return Shipment.objects.filter(pk=id).first()
