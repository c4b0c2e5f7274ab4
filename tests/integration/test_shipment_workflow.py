"""End-to-end shipment creation through the real customer RPC client.

``HttpCustomerClient`` is given a ``requests``-compatible session that
dispatches into the Django test client instead of the network, so the
whole path runs: shipment view -> service -> RPC client -> customer RPC
view -> customer service -> database.
"""

from __future__ import annotations

import json
from decimal import Decimal
from urllib.parse import urlsplit

import pytest
from django.test import Client

from modules.customers.models import Customer
from modules.shipments.clients.customer_client import HttpCustomerClient
from modules.shipments.models import Shipment

pytestmark = pytest.mark.integration

SHIPMENTS_URL = "/api/v1/shipments"
VALID_IDN = "123456789012"


class _DjangoResponse:
    """Just enough of ``requests.Response`` for the client."""

    def __init__(self, django_response) -> None:
        self.status_code = django_response.status_code
        self.ok = self.status_code < 400
        self._content = django_response.content

    def json(self):
        return json.loads(self._content)


class DjangoTestSession:
    """Routes ``session.post(url, ...)`` to the in-process Django app."""

    def __init__(self) -> None:
        self.client = Client()
        self.calls: list[dict] = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        response = self.client.post(
            urlsplit(url).path,
            data=json,
            content_type="application/json",
            headers=headers or {},
        )
        return _DjangoResponse(response)


@pytest.fixture()
def rpc_session(monkeypatch):
    session = DjangoTestSession()
    monkeypatch.setattr(
        HttpCustomerClient,
        "from_settings",
        classmethod(lambda cls: cls(base_url="http://customer-service.test", timeout=5.0, session=session)),
    )
    return session


def _create(api_client, idn: str = VALID_IDN, **headers):
    return api_client.post(
        SHIPMENTS_URL,
        json.dumps({"route": "ALMATY-ASTANA", "price": 120000.10, "customer": {"idn": idn}}),
        content_type="application/json",
        **headers,
    )


class TestShipmentWorkflow:
    def test_create_then_read(self, api_client, rpc_session):
        created = _create(api_client)

        assert created.status_code == 201
        body = created.json()
        customer = Customer.objects.get(idn=VALID_IDN)
        assert body["customerId"] == str(customer.id)

        fetched = api_client.get(f"{SHIPMENTS_URL}/{body['id']}")
        assert fetched.status_code == 200
        data = fetched.json()
        assert data["route"] == "ALMATY-ASTANA"
        assert Decimal(str(data["price"])) == Decimal("120000.10")
        assert data["customerId"] == str(customer.id)
        assert data["status"] == "CREATED"

    def test_same_idn_reuses_customer(self, api_client, rpc_session):
        first = _create(api_client).json()
        second = _create(api_client).json()

        assert first["customerId"] == second["customerId"]
        assert first["id"] != second["id"]
        assert Customer.objects.count() == 1
        assert Shipment.objects.count() == 2

    def test_correlation_id_and_budget_forwarded(self, api_client, rpc_session):
        response = _create(api_client, HTTP_X_REQUEST_ID="cid-e2e-1")

        assert response.status_code == 201
        assert response["X-Request-ID"] == "cid-e2e-1"
        headers = rpc_session.calls[0]["headers"]
        assert headers["X-Request-ID"] == "cid-e2e-1"
        assert 0 < float(headers["X-Request-Timeout"]) <= 10

    def test_spent_budget_stops_before_the_remote_call(self, api_client, rpc_session):
        response = _create(api_client, HTTP_X_REQUEST_TIMEOUT="0")

        assert response.status_code == 503
        assert response.json() == {"error": "request deadline exceeded"}
        assert rpc_session.calls == []
        assert not Customer.objects.exists()
        assert not Shipment.objects.exists()

    def test_round_trip_trims_idn_and_keeps_route(self, api_client, rpc_session):
        created = api_client.post(
            SHIPMENTS_URL,
            '{"route": "ALMATY->ASTANA", "price": 120000, "customer": {"idn": " 990101123456 "}}',
            content_type="application/json",
        )

        assert created.status_code == 201
        body = created.json()
        assert body["status"] == "CREATED"
        assert rpc_session.calls[0]["json"] == {"idn": "990101123456"}
        customer = Customer.objects.get(idn="990101123456")
        assert body["customerId"] == str(customer.id)

        fetched = api_client.get(f"{SHIPMENTS_URL}/{body['id']}")
        assert fetched.status_code == 200
        data = fetched.json()
        assert data["id"] == body["id"]
        assert data["route"] == "ALMATY->ASTANA"
        assert Decimal(str(data["price"])) == Decimal("120000")
        assert data["status"] == "CREATED"
        assert data["customerId"] == str(customer.id)
        assert data["created_at"].endswith("Z")
