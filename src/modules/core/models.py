"""Base abstract model shared by the customer and shipment tables.

Both entities are write-once: an id assigned by the server and a creation
timestamp, no ``updated_at`` and no soft delete.
"""

from __future__ import annotations

import uuid6
from django.db import models


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and a creation timestamp (UTC)."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
