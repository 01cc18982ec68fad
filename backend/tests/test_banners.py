"""Integration tests for /api/banner endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from poster_service.models import Banner

BANNER = {"type": "home", "imageurl": "http://x/y.png", "name": "A"}


@pytest.mark.asyncio
async def test_create_banner(client: AsyncClient) -> None:
    resp = await client.post("/api/banner", json=BANNER)

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Banner created successfully"
    assert body["data"]["type"] == "home"
    assert body["data"]["imageurl"] == "http://x/y.png"
    assert body["data"]["name"] == "A"


@pytest.mark.asyncio
async def test_create_banner_trims_fields(client: AsyncClient) -> None:
    resp = await client.post(
        "/api/banner", json={"type": " webinar ", "imageurl": " http://x ", "name": " B "}
    )

    assert resp.status_code == 201
    data = resp.json()["data"]
    assert (data["type"], data["imageurl"], data["name"]) == ("webinar", "http://x", "B")


@pytest.mark.asyncio
async def test_create_banner_bad_type(client: AsyncClient, db: AsyncSession) -> None:
    resp = await client.post("/api/banner", json={**BANNER, "type": "sidebar"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Type must be one of: home, webinar, course"
    count = (await db.execute(select(func.count()).select_from(Banner))).scalar_one()
    assert count == 0


@pytest.mark.asyncio
async def test_create_banner_missing_field(client: AsyncClient) -> None:
    resp = await client.post("/api/banner", json={"type": "home", "name": "A"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "All fields are required."


@pytest.mark.asyncio
async def test_get_banner_invalid_id_format(client: AsyncClient) -> None:
    resp = await client.get("/api/banner/zzz")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid banner ID format."


@pytest.mark.asyncio
async def test_delete_banner_invalid_id_format(client: AsyncClient) -> None:
    resp = await client.delete("/api/banner/not-an-id")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid banner ID format."


@pytest.mark.asyncio
async def test_get_banner_round_trip(client: AsyncClient) -> None:
    created = (await client.post("/api/banner", json=BANNER)).json()["data"]

    resp = await client.get(f"/api/banner/{created['id']}")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Banner fetched successfully", "data": created}


@pytest.mark.asyncio
async def test_get_unknown_banner_is_404(client: AsyncClient) -> None:
    resp = await client.get("/api/banner/65f1c2abcdef0123456789ab")

    assert resp.status_code == 404
    assert resp.json()["message"] == "No banner found with id '65f1c2abcdef0123456789ab'"


@pytest.mark.asyncio
async def test_list_banners_uses_envelope(client: AsyncClient, seeded_db: AsyncSession) -> None:
    resp = await client.get("/api/banner")

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Banners retrieved successfully"
    assert len(body["data"]) == 2


@pytest.mark.asyncio
async def test_delete_banner(client: AsyncClient) -> None:
    created = (await client.post("/api/banner", json=BANNER)).json()["data"]

    resp = await client.delete(f"/api/banner/{created['id']}")

    assert resp.status_code == 200
    assert resp.json()["message"] == "Banner deleted successfully"
    assert (await client.get(f"/api/banner/{created['id']}")).status_code == 404
