"""Serializer building blocks for strict JSON request bodies."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from rest_framework import serializers

from shared.formatting import to_rfc3339


class RejectUnknownFieldsMixin:
    """Fail validation when the payload carries keys the serializer lacks."""

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            unknown = sorted(set(data) - set(self.fields))
            if unknown:
                raise serializers.ValidationError(
                    {name: ["Unknown field."] for name in unknown}
                )
        return super().to_internal_value(data)


class JSONNumberField(serializers.DecimalField):
    """Decimal field that only accepts JSON numbers (no strings, no booleans).

    Combined with ``DecimalJSONParser`` the value arrives as ``int`` or
    ``Decimal`` and is kept exact.
    """

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, Decimal)):
            self.fail("invalid")
        return super().to_internal_value(data)


class JSONStringField(serializers.CharField):
    """``CharField`` that refuses to coerce numbers or booleans into text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class RFC3339DateTimeField(serializers.DateTimeField):
    """Render datetimes as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC."""

    def to_representation(self, value):
        if value is None:
            return None
        return to_rfc3339(value)
