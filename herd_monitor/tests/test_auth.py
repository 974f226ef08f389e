"""
Tests for API key authentication and session headers, against the
production app.
"""
import pytest
from fastapi.testclient import TestClient

from herd_monitor.core.config import API_KEY


@pytest.fixture
def authenticated_client():
    from herd_monitor.main import app
    return TestClient(app)


class TestAuthentication:

    def test_missing_api_key_returns_401(self, authenticated_client):
        response = authenticated_client.get("/api/v1/cattle/image", params={"breed": "Gir", "rfid": "E1"})
        assert response.status_code == 401
        assert "Missing API key" in response.json()["detail"]

    def test_invalid_api_key_returns_403(self, authenticated_client):
        response = authenticated_client.get(
            "/api/v1/cattle/image",
            params={"breed": "Gir", "rfid": "E1"},
            headers={"X-API-Key": "invalid-key"},
        )
        assert response.status_code == 403
        assert "Invalid API key" in response.json()["detail"]

    def test_valid_api_key_allows_access(self, authenticated_client):
        response = authenticated_client.get(
            "/api/v1/cattle/image",
            params={"breed": "Gir", "rfid": "E1"},
            headers={"X-API-Key": API_KEY},
        )
        assert response.status_code == 200
        assert response.headers["X-Request-ID"]

    def test_health_endpoint_no_auth_required(self, authenticated_client):
        assert authenticated_client.get("/health").status_code == 200

    def test_session_headers_required(self, authenticated_client):
        response = authenticated_client.get(
            "/api/v1/dashboard/herd",
            headers={"X-API-Key": API_KEY, "X-User-Id": "USER001"},
        )
        assert response.status_code == 401
        assert "X-User-Role" in response.json()["detail"]
