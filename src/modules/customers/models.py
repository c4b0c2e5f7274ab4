"""Customer model.

Business rules implemented:
- IDN is the natural key: exactly 12 digits, unique across all customers.
- ``id`` is generated by the server, immutable and never reused.
- Customers are never updated or deleted by the shipment workflow.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root, identified externally by its IDN."""

    idn = models.CharField(max_length=12, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]

    # ------------------------------------------------------------------
    # Display (IDN is personal data, masked)
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        suffix = self.idn[-4:] if self.idn else "????"
        return f"Customer {self.id} (IDN ***{suffix})"
