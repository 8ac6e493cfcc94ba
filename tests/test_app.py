"""Tests for app-level routes and middleware."""

from fastapi.testclient import TestClient


def test_health(test_client: TestClient):
    response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_cors_headers(test_client: TestClient):
    response = test_client.options(
        "/api/source",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers
