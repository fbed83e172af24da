"""
Tests for the main application endpoints.
"""
import importlib

import pytest


def test_root_endpoint(client):
    """
    Test the root endpoint returns a welcome message.
    """
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data


def test_health_check(client):
    """
    Test the health check endpoint returns a healthy status.
    """
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "database" in data


def test_responses_carry_request_id(client):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]
    assert "X-Process-Time" in response.headers


def test_app_fixes_configured_admin(app, client):
    response = client.get("/api/v1/users/0x" + "A" * 40)
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "ADMIN"
    assert data["name"] == "System Admin"


def test_upstream_request_id_is_kept(client):
    response = client.get("/health", headers={"X-Request-ID": "gateway-42"})
    assert response.headers["X-Request-ID"] == "gateway-42"


@pytest.mark.parametrize("package", [
    "identity", "records", "access", "audit", "authorization", "emergency", "core",
])
def test_packages_are_documented(package):
    module = importlib.import_module(f"medchain.{package}")
    assert module.__doc__ and module.__doc__.strip()
