"""Input checks run by the shipment workflow before any I/O."""

from __future__ import annotations

import re
from decimal import Decimal

from modules.shipments.constants import PRICE_DECIMAL_PLACES, PRICE_MAX_INTEGER_DIGITS

IDN_PATTERN = re.compile(r"\d{12}", re.ASCII)


def is_valid_idn(value: str) -> bool:
    """Return ``True`` when *value* is exactly 12 decimal digits."""
    return isinstance(value, str) and IDN_PATTERN.fullmatch(value) is not None


def is_valid_price(value: Decimal) -> bool:
    """Positive, finite, and storable in the price column without rounding."""
    if not isinstance(value, Decimal) or not value.is_finite() or value <= 0:
        return False

    sign, digits, exponent = value.normalize().as_tuple()
    decimal_places = max(0, -exponent)
    integer_digits = max(0, len(digits) + exponent)
    return (
        decimal_places <= PRICE_DECIMAL_PLACES
        and integer_digits <= PRICE_MAX_INTEGER_DIGITS
    )
