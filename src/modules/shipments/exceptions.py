"""Shipment domain exceptions.

Raised by the Service Layer when business rules are violated.
The API views catch these and translate them to HTTP status codes.
"""

from __future__ import annotations

from shared.domain.errors import InvalidInput, NotFound


class InvalidRoute(InvalidInput):
    """Route is empty after trimming."""

    default_message = "invalid route"


class InvalidPrice(InvalidInput):
    """Price is not a positive amount with at most two decimal places."""

    default_message = "invalid price"


class InvalidIDN(InvalidInput):
    default_message = "invalid idn"


class InvalidShipmentID(InvalidInput):
    default_message = "invalid shipment id"


class ShipmentNotFound(NotFound):
    default_message = "shipment not found"
