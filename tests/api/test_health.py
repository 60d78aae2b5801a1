"""Tests for health endpoints."""

from inventory_costing import __version__
from inventory_costing.infrastructure.storage.sqlite import close_connection_pool


async def test_root_health_check(async_client):
    response = await async_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


async def test_api_health_check(async_client):
    response = await async_client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["uptime_seconds"] >= 0
    assert data["database"] is None


async def test_db_health(async_client):
    try:
        response = await async_client.get("/api/health/db")
    finally:
        await close_connection_pool()

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "available"


async def test_request_id_header(async_client):
    response = await async_client.get("/api/health")

    assert len(response.headers["X-Request-ID"]) == 8
    assert response.headers["X-Response-Time"].endswith("ms")
