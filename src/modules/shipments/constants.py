"""Shipment domain constants."""

from __future__ import annotations

from django.db import models


class ShipmentStatus(models.TextChoices):
    """Lifecycle of a shipment.  Only the initial state exists today."""

    CREATED = "CREATED", "Created"


# price column is NUMERIC(14,2)
PRICE_MAX_DIGITS = 14
PRICE_DECIMAL_PLACES = 2
PRICE_MAX_INTEGER_DIGITS = PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES
