"""Shipment model.

Business rules implemented:
- ``price`` is exact money: NUMERIC(14,2), never a float.
- ``status`` starts at ``CREATED``; there are no transitions yet.
- ``customer_id`` references a customer owned by the customer service.
  It is a plain UUID column, not a foreign key, because the two services
  own their tables independently.
- Shipments are created once and never updated or deleted.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel
from modules.shipments.constants import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    ShipmentStatus,
)


class Shipment(BaseModel):
    """A priced route booked for one customer."""

    route = models.TextField()
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    status = models.CharField(
        max_length=20,
        choices=ShipmentStatus.choices,
        default=ShipmentStatus.CREATED,
    )
    customer_id = models.UUIDField(db_index=True)

    class Meta:
        db_table = "shipments"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Shipment {self.id} ({self.status})"
