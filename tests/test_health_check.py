from unittest.mock import patch

from django.db import DatabaseError


class TestHealthCheck:
    def test_health_check_returns_plain_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.content == b"OK"
        assert response["Content-Type"].startswith("text/plain")


class TestReadinessCheck:
    def test_ready_when_database_answers(self, client):
        response = client.get("/ready")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["database"]["status"] == "up"
        assert "response_time_ms" in data["database"]

    def test_unavailable_when_database_fails(self, client):
        with patch("modules.core.views.connections") as mock_connections:
            conn = mock_connections.__getitem__.return_value
            conn.ensure_connection.side_effect = DatabaseError("connection refused")
            response = client.get("/ready")
        assert response.status_code == 503
        assert response.json() == {"status": "unavailable"}
