"""Shipment DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).  It checks the
*shape* of the body only: unknown fields and wrong JSON types are rejected,
missing fields fall back to empty values so ``ShipmentService`` reports
them in its own validation order.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from modules.core.serializers import (
    JSONNumberField,
    JSONStringField,
    RejectUnknownFieldsMixin,
    RFC3339DateTimeField,
)
from modules.shipments.constants import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS
from modules.shipments.models import Shipment

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CustomerRefSerializer(RejectUnknownFieldsMixin, serializers.Serializer):
    idn = JSONStringField(
        required=False, default="", allow_blank=True, trim_whitespace=False
    )


class CreateShipmentSerializer(RejectUnknownFieldsMixin, serializers.Serializer):
    """Validates the shipment creation request payload."""

    route = JSONStringField(
        required=False, default="", allow_blank=True, trim_whitespace=False
    )
    price = JSONNumberField(
        max_digits=None, decimal_places=None, required=False, default=Decimal(0)
    )
    customer = CustomerRefSerializer(required=False)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class ShipmentCreatedSerializer(serializers.ModelSerializer):
    """Body of ``201 Created``."""

    customerId = serializers.UUIDField(source="customer_id", read_only=True)

    class Meta:
        model = Shipment
        fields = ["id", "status", "customerId"]
        read_only_fields = fields


class ShipmentSerializer(serializers.ModelSerializer):
    """Read serializer for a single shipment."""

    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        coerce_to_string=False,
        read_only=True,
    )
    customerId = serializers.UUIDField(source="customer_id", read_only=True)
    created_at = RFC3339DateTimeField(read_only=True)

    class Meta:
        model = Shipment
        fields = ["id", "route", "price", "status", "customerId", "created_at"]
        read_only_fields = fields
