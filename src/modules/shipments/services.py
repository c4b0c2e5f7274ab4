"""Shipment service layer (Use Cases).

Orchestrates shipment creation across the customer service and the local
shipment table.  Dependencies are injected via the constructor (DIP).

Business rules enforced here:
- Input is validated in a fixed order (route, price, IDN) before any
  network or database access; the first failure wins.
- The customer upsert must succeed before the shipment is written.  Its
  outcome is authoritative: failures propagate unchanged and the
  repository is not touched.
- The customer upsert and the shipment insert are two independent
  transactions.  An insert failure leaves only the (idempotent) customer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

import structlog

from modules.shipments.exceptions import (
    InvalidIDN,
    InvalidPrice,
    InvalidRoute,
    InvalidShipmentID,
    ShipmentNotFound,
)
from modules.shipments.validators import is_valid_idn, is_valid_price

if TYPE_CHECKING:
    from modules.core.deadline import Deadline
    from modules.shipments.clients.interfaces import ICustomerClient
    from modules.shipments.dtos import CreateShipmentDTO
    from modules.shipments.models import Shipment
    from modules.shipments.repositories.interfaces import IShipmentRepository

logger = structlog.get_logger(__name__)


class ShipmentService:
    """Application service for Shipment use-cases."""

    def __init__(
        self,
        repository: IShipmentRepository,
        customer_client: ICustomerClient,
    ) -> None:
        self._repo = repository
        self._customers = customer_client

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_shipment(
        self, dto: CreateShipmentDTO, deadline: Optional[Deadline] = None
    ) -> Shipment:
        """Ensure the customer exists, then persist a new shipment.

        Raises:
            InvalidRoute: route is empty after trimming.
            InvalidPrice: price is not positive or not storable exactly.
            InvalidIDN: IDN is not exactly 12 digits after trimming.
            UpstreamRejected / UpstreamUnavailable / NotFound / Internal:
                the customer upsert failed.
        """
        route = dto.route.strip()
        if not route:
            raise InvalidRoute()

        if not is_valid_price(dto.price):
            raise InvalidPrice()

        idn = dto.customer_idn.strip()
        if not is_valid_idn(idn):
            raise InvalidIDN()

        customer = self._customers.upsert_by_idn(idn, deadline=deadline)

        shipment = self._repo.create(
            route=route,
            price=dto.price,
            customer_id=customer.id,
            deadline=deadline,
        )

        logger.info(
            "shipment.created",
            shipment_id=str(shipment.id),
            customer_id=str(customer.id),
        )
        return shipment

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_shipment(
        self, shipment_id: str, deadline: Optional[Deadline] = None
    ) -> Shipment:
        """Retrieve a single shipment by id.

        Raises:
            InvalidShipmentID: *shipment_id* is not a UUID.
            ShipmentNotFound: no shipment has this id.
        """
        try:
            parsed_id = UUID(str(shipment_id))
        except ValueError:
            raise InvalidShipmentID()

        shipment = self._repo.get_by_id(parsed_id, deadline=deadline)
        if not shipment:
            raise ShipmentNotFound()
        return shipment
