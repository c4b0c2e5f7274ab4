"""Outbound clients used by the shipment workflow."""

from modules.shipments.clients.customer_client import HttpCustomerClient
from modules.shipments.clients.interfaces import ICustomerClient

__all__ = ["ICustomerClient", "HttpCustomerClient"]
