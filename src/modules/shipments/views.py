"""Shipment API views.

Exposes ``ShipmentService`` via HTTP using a DRF ViewSet.  Domain
exceptions are caught and translated into HTTP status codes:

- ``InvalidInput`` / ``UpstreamRejected`` -> 400
- ``NotFound`` -> 404
- ``UpstreamUnavailable`` (including ``DeadlineExceeded``) -> 503

``Internal`` and unclassified exceptions are left to the project
exception handler, which logs them and answers a generic 500.
"""

from __future__ import annotations

import structlog
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import (
    INVALID_BODY_MESSAGE,
    domain_error_response,
    error_response,
)
from modules.core.parsers import AnyMediaJSONParser
from modules.shipments.clients.customer_client import HttpCustomerClient
from modules.shipments.dtos import CreateShipmentDTO
from modules.shipments.repositories.django_repository import ShipmentDjangoRepository
from modules.shipments.serializers import (
    CreateShipmentSerializer,
    ShipmentCreatedSerializer,
    ShipmentSerializer,
)
from modules.shipments.services import ShipmentService
from shared.domain.errors import (
    InvalidInput,
    NotFound,
    UpstreamRejected,
    UpstreamUnavailable,
)

logger = structlog.get_logger(__name__)


class ShipmentViewSet(GenericViewSet):
    """ViewSet for Shipment operations.

    Uses ``ShipmentService`` with an injected repository and customer
    client (DIP).  All ORM access goes through the service/repository
    layer.
    """

    serializer_class = ShipmentSerializer
    parser_classes = [AnyMediaJSONParser]
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ShipmentService(
            repository=ShipmentDjangoRepository(),
            customer_client=HttpCustomerClient.from_settings(),
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/shipments"""
        if request.stream is None:
            logger.info("shipment.empty_body")
            return error_response(INVALID_BODY_MESSAGE, status.HTTP_400_BAD_REQUEST)

        create_serializer = CreateShipmentSerializer(data=request.data)
        if not create_serializer.is_valid():
            logger.info("shipment.invalid_body", errors=create_serializer.errors)
            return error_response(INVALID_BODY_MESSAGE, status.HTTP_400_BAD_REQUEST)

        data = create_serializer.validated_data
        dto = CreateShipmentDTO(
            route=data["route"],
            price=data["price"],
            customer_idn=data.get("customer", {}).get("idn", ""),
        )

        try:
            shipment = self._service.create_shipment(
                dto, deadline=getattr(request, "deadline", None)
            )
        except (InvalidInput, UpstreamRejected, NotFound) as exc:
            logger.info("shipment.create_rejected", kind=exc.kind, reason=exc.message)
            return domain_error_response(exc)
        except UpstreamUnavailable as exc:
            logger.warning("shipment.customer_unavailable", reason=exc.message)
            return domain_error_response(exc)

        out = ShipmentCreatedSerializer(shipment)
        return Response(out.data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/shipments/{pk}"""
        try:
            shipment = self._service.get_shipment(
                pk or "", deadline=getattr(request, "deadline", None)
            )
        except (InvalidInput, NotFound, UpstreamUnavailable) as exc:
            logger.info("shipment.retrieve_failed", kind=exc.kind, reason=exc.message)
            return domain_error_response(exc)

        serializer = ShipmentSerializer(shipment)
        return Response(serializer.data)
