"""Tests for /api/service-areas and /api/areas/check/{postcode}."""

from httpx import AsyncClient


async def test_list_service_areas(client: AsyncClient) -> None:
    response = await client.get("/api/service-areas")
    assert response.status_code == 200
    data = response.json()
    assert data["statusCode"] == 200
    assert data["message"] == "Service areas retrieved successfully"
    assert [a["postcode"] for a in data["data"]] == ["4000", "4217", "4557"]


async def test_lookup_malformed_postcode_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/service-areas", json={"postcode": "abc1"})
    assert response.status_code == 400
    assert response.json()["message"] == "Postcode must be 4 digits"


async def test_lookup_numeric_postcode_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/service-areas", json={"postcode": 4217})
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_lookup_missing_postcode_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/service-areas", json={})
    assert response.status_code == 400
    assert response.json()["message"] == "Postcode is required"


async def test_lookup_exact_postcode(client: AsyncClient) -> None:
    response = await client.post("/api/service-areas", json={"postcode": "4217"})
    assert response.status_code == 200
    areas = response.json()["data"]
    assert areas
    assert all(a["postcode"] == "4217" for a in areas)


async def test_lookup_unknown_postcode_returns_404(client: AsyncClient) -> None:
    response = await client.post("/api/service-areas", json={"postcode": "9999"})
    assert response.status_code == 404
    assert response.json()["message"] == "No service areas found for this postcode"


async def test_coverage_check(client: AsyncClient) -> None:
    response = await client.get("/api/areas/check/4215")
    assert response.status_code == 200
    assert response.json() == {"postcode": "4215", "isServiced": True, "areas": ["Gold Coast"]}
    assert response.headers["cache-control"] == (
        "public, s-maxage=3600, stale-while-revalidate=7200"
    )


async def test_coverage_check_not_serviced(client: AsyncClient) -> None:
    response = await client.get("/api/areas/check/2000")
    assert response.json()["isServiced"] is False


async def test_coverage_check_malformed(client: AsyncClient) -> None:
    response = await client.get("/api/areas/check/40a0")
    assert response.status_code == 400


async def test_list_regions(client: AsyncClient) -> None:
    response = await client.get("/api/areas")
    assert response.status_code == 200
    assert response.headers["cache-control"] == (
        "public, max-age=3600, stale-while-revalidate=7200"
    )
    regions = response.json()
    assert regions[0]["name"] == "Brisbane"
    assert regions[0]["postcodes"] == ["4000", "4199"]
    assert "Water Damage Restoration" in regions[0]["services"]
    assert regions[0]["emergencyResponse"] == {"available": True, "responseTime": "1-2 hours"}
    assert regions[0]["coverage"] == {
        "residential": True,
        "commercial": True,
        "industrial": True,
    }


async def test_availability_for_covered_postcode(client: AsyncClient) -> None:
    response = await client.post("/api/areas", json={"postcode": "4215"})
    assert response.status_code == 200
    body = response.json()
    assert body["available"] is True
    assert body["area"] == "Gold Coast"
    assert body["emergencyResponse"]["responseTime"] == "1-2 hours"
    assert "message" not in body


async def test_availability_for_uncovered_postcode(client: AsyncClient) -> None:
    response = await client.post("/api/areas", json={"postcode": "2000"})
    assert response.status_code == 200
    assert response.json() == {
        "available": False,
        "message": "Sorry, we do not currently service this area. "
        "Please contact us for more information.",
    }


async def test_availability_requires_postcode(client: AsyncClient) -> None:
    response = await client.post("/api/areas", json={})
    assert response.status_code == 400
    assert response.json()["message"] == "Postcode is required"
