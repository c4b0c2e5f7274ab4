"""Integration tests for the customer RPC endpoints.

Covers the RPC status mapping on the server side:
- INVALID_ARGUMENT for malformed bodies and bad IDNs.
- NOT_FOUND for unknown customers.
- DEADLINE_EXCEEDED when the forwarded budget is already spent.
- INTERNAL with a generic message for unexpected failures.
"""

from __future__ import annotations

from unittest.mock import patch
from uuid import UUID

import pytest

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

pytestmark = pytest.mark.integration

UPSERT_URL = "/rpc/v1/customers/upsert"
GET_URL = "/rpc/v1/customers/get"
VALID_IDN = "123456789012"


class TestUpsertCustomerRpc:
    def test_creates_customer(self, api_client):
        response = api_client.post(UPSERT_URL, {"idn": VALID_IDN}, format="json")

        assert response.status_code == 200
        data = response.json()
        assert data["idn"] == VALID_IDN
        assert UUID(data["id"]).version == 7
        assert data["createdAt"].endswith("Z")
        assert Customer.objects.filter(idn=VALID_IDN).count() == 1

    def test_repeated_upsert_returns_same_customer(self, api_client):
        first = api_client.post(UPSERT_URL, {"idn": VALID_IDN}, format="json").json()
        second = api_client.post(UPSERT_URL, {"idn": VALID_IDN}, format="json").json()

        assert first == second
        assert Customer.objects.count() == 1

    @pytest.mark.parametrize("idn", ["", "12345", "12345678901a", "1234567890123"])
    def test_invalid_idn(self, api_client, idn):
        response = api_client.post(UPSERT_URL, {"idn": idn}, format="json")

        assert response.status_code == 400
        assert response.json() == {"code": "INVALID_ARGUMENT", "message": "invalid idn"}
        assert not Customer.objects.exists()

    @pytest.mark.parametrize(
        "body",
        [
            "{",
            "[]",
            '{"idn": 123456789012}',
            '{"idn": "123456789012", "name": "x"}',
            "{}",
        ],
    )
    def test_malformed_request(self, api_client, body):
        response = api_client.post(UPSERT_URL, body, content_type="application/json")

        assert response.status_code == 400
        assert response.json() == {
            "code": "INVALID_ARGUMENT",
            "message": "request is required",
        }

    def test_spent_deadline(self, api_client):
        response = api_client.post(
            UPSERT_URL,
            {"idn": VALID_IDN},
            format="json",
            HTTP_X_REQUEST_TIMEOUT="0",
        )

        assert response.status_code == 504
        assert response.json()["code"] == "DEADLINE_EXCEEDED"
        assert not Customer.objects.exists()

    def test_unexpected_failure_is_internal(self, api_client):
        with patch.object(
            CustomerDjangoRepository,
            "upsert_by_idn",
            side_effect=RuntimeError("disk full"),
        ):
            response = api_client.post(UPSERT_URL, {"idn": VALID_IDN}, format="json")

        assert response.status_code == 500
        assert response.json() == {"code": "INTERNAL", "message": "internal error"}

    def test_get_method_not_allowed(self, api_client):
        response = api_client.get(UPSERT_URL)

        assert response.status_code == 405


class TestGetCustomerRpc:
    def test_returns_existing_customer(self, api_client):
        customer = Customer.objects.create(idn=VALID_IDN)

        response = api_client.post(GET_URL, {"idn": VALID_IDN}, format="json")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(customer.id)
        assert data["idn"] == VALID_IDN

    def test_unknown_customer(self, api_client):
        response = api_client.post(GET_URL, {"idn": VALID_IDN}, format="json")

        assert response.status_code == 404
        assert response.json() == {"code": "NOT_FOUND", "message": "customer not found"}

    def test_invalid_idn(self, api_client):
        response = api_client.post(GET_URL, {"idn": "abc"}, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"
