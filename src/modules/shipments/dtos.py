"""Shipment DTOs for the Service Layer.

``CreateShipmentDTO`` is the contract between the API layer (DRF
serializer) and ``ShipmentService``.  It carries the raw, untrimmed values:
the service owns validation so it runs in a fixed order before any I/O.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class CreateShipmentDTO(BaseModel):
    """Immutable input for shipment creation."""

    model_config = ConfigDict(frozen=True)

    route: str = ""
    price: Decimal = Decimal(0)
    customer_idn: str = ""
