"""Shipment URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.shipments.views import ShipmentViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"shipments", ShipmentViewSet, basename="shipment")

urlpatterns = router.urls
