"""Tests for /api/services, /api/emergency and /api/contact."""

import re

from httpx import AsyncClient


async def test_services_listing(client: AsyncClient) -> None:
    response = await client.get("/api/services")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    water = data["data"][0]
    assert water["id"] == "water-damage"
    assert water["emergency"]["available"] is True
    assert water["emergency"]["responseTime"] == "1-2 hours"
    assert len(water["process"]) == 4


async def test_emergency_request_accepted(app, client: AsyncClient) -> None:
    response = await client.post(
        "/api/emergency",
        json={"name": "Sam", "phone": "0400 000 000", "service": "water-damage", "postcode": "4000"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert re.fullmatch(r"EMG-[0-9A-Z]+-[0-9A-Z]{5}", data["requestId"])
    assert data["contact"]["phone"] == "1300 309 361"
    assert len(data["nextSteps"]) == 4
    assert response.headers["cache-control"] == "no-store"
    assert app.state.emergency_repo.count() == 1


async def test_emergency_missing_fields(client: AsyncClient) -> None:
    response = await client.post("/api/emergency", json={"name": "Sam"})
    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields: phone, service"


async def test_emergency_invalid_service(client: AsyncClient) -> None:
    response = await client.post(
        "/api/emergency", json={"name": "Sam", "phone": "0400", "service": "roofing"}
    )
    assert response.status_code == 400


async def test_emergency_outside_service_area(client: AsyncClient) -> None:
    response = await client.post(
        "/api/emergency",
        json={"name": "Sam", "phone": "0400", "service": "fire-damage", "postcode": "2000"},
    )
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "OUTSIDE_SERVICE_AREA"
    assert data["details"]["contact"]["phone"] == "1300 309 361"


async def test_contact_form(app, client: AsyncClient) -> None:
    response = await client.post(
        "/api/contact",
        json={"name": "Alex", "email": "alex@example.com", "message": "Leak", "serviceType": "water-damage"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["serviceType"] == "water-damage"
    assert data["isEmergency"] is False
    assert app.state.contact_repo.list_recent()[0].id == data["id"]


async def test_contact_form_missing_fields(client: AsyncClient) -> None:
    response = await client.post("/api/contact", json={"name": "Alex"})
    assert response.status_code == 400


async def test_oversized_body_rejected(client: AsyncClient) -> None:
    response = await client.post(
        "/api/contact",
        json={"name": "Alex", "email": "a@b.au", "message": "x" * (70 * 1024)},
    )
    assert response.status_code == 413
