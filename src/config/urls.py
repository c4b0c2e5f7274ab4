"""Root URL configuration.

``SERVICE_NAME`` decides which modules this process serves:

- ``customer``: customer RPC endpoints
- ``shipment``: shipment HTTP API and its OpenAPI docs
- ``all``: both (development and tests)

Health and readiness probes are always mounted.
"""

from django.conf import settings
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("", include("modules.core.urls")),
]

if settings.SERVICE_NAME in ("customer", "all"):
    urlpatterns += [
        path("", include("modules.customers.urls")),
    ]

if settings.SERVICE_NAME in ("shipment", "all"):
    urlpatterns += [
        path("api/v1/", include("modules.shipments.urls")),
        # OpenAPI schema & docs (public)
        path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
        path(
            "api/docs/",
            SpectacularSwaggerView.as_view(url_name="schema"),
            name="swagger-ui",
        ),
    ]
