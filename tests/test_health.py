"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/health returns 200 and status ok."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["timestamp"].endswith("Z")


async def test_readiness_reports_cache_stats(client: AsyncClient) -> None:
    """GET /api/health/ready includes cache size and catalog size."""
    await client.get("/api/service-areas")
    response = await client.get("/api/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["cache"]["size"] == 1
    assert data["cache"]["namespaces"] == {"service-area": 1}
    assert data["catalogEntries"] > 0


async def test_root_returns_html(client: AsyncClient) -> None:
    """GET / returns HTML landing page with the emergency number."""
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers.get("content-type", "")
    assert "1300 309 361" in response.text


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    """A safe client request id is forwarded; correlation id falls back to it."""
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"
    assert response.headers["x-correlation-id"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/api/health", headers={"X-Request-ID": "bad id with spaces!"})
    assert response.headers["x-request-id"] != "bad id with spaces!"
    assert len(response.headers["x-request-id"]) == 36


async def test_security_headers_present(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
