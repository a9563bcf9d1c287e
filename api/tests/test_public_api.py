"""Tests for public API."""

from datetime import datetime

import api.routers.public as public
import pytest
from httpx import AsyncClient
from moonglass.config import reset_settings_cache


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "moonglass-api"}


@pytest.mark.asyncio
async def test_readiness(client: AsyncClient, monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Europe/Berlin")
    reset_settings_cache()
    response = await client.get("/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "timezone": "Europe/Berlin"}


@pytest.mark.asyncio
async def test_phase_status_at_epoch(client: AsyncClient):
    response = await client.get("/v1/phase", params={"at": "2000-01-06T00:00:00"})
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "New Moon"
    assert body["illumination_pct"] == 100
    assert body["new_moon_relative"] == "Today"
    assert body["full_moon_relative"] == "In 14 days"
    assert body["phase"] == pytest.approx(0.0, abs=1e-12)


@pytest.mark.asyncio
async def test_phase_status_defaults_to_now(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(public, "local_now", lambda: datetime(2000, 1, 6))
    response = await client.get("/v1/phase")
    assert response.status_code == 200
    assert response.json()["at"] == "2000-01-06T00:00:00"


@pytest.mark.asyncio
async def test_next_new_moon(client: AsyncClient):
    response = await client.get("/v1/next/new", params={"at": "2000-01-01T00:00:00"})
    assert response.status_code == 200
    assert response.json() == {"kind": "new", "at": "2000-01-05T23:00:00"}


@pytest.mark.asyncio
async def test_next_rejects_unknown_kind(client: AsyncClient):
    response = await client.get("/v1/next/quarter")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_events(client: AsyncClient):
    response = await client.get(
        "/v1/events",
        params={"start": "2000-01-01T00:00:00", "end": "2000-01-10T00:00:00"},
    )
    assert response.status_code == 200
    body = response.json()
    assert [(e["at"], e["kind"]) for e in body] == [
        ("2000-01-06T00:00:00", "new-moon"),
        ("2000-01-07T00:00:00", "new-moon"),
    ]


@pytest.mark.asyncio
async def test_events_reversed_range_is_empty(client: AsyncClient):
    response = await client.get(
        "/v1/events",
        params={"start": "2000-02-01T00:00:00", "end": "2000-01-01T00:00:00"},
    )
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_events_rejects_long_span(client: AsyncClient):
    response = await client.get(
        "/v1/events",
        params={"start": "2000-01-01T00:00:00", "end": "2010-01-01T00:00:00"},
    )
    assert response.status_code == 422
    assert response.json()["parameter"] == "end"


@pytest.mark.asyncio
async def test_events_rejects_mixed_awareness(client: AsyncClient):
    response = await client.get(
        "/v1/events",
        params={"start": "2000-01-01T00:00:00", "end": "2000-01-10T00:00:00Z"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_timeline(client: AsyncClient):
    response = await client.get("/v1/timeline/2000/1", params={"current": "2000-01-20T12:00:00"})
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "January 2000"
    assert len(body["days"]) == 31
    assert any(m["current"] and m["kind"] == "full-moon" for m in body["markers"])


@pytest.mark.asyncio
async def test_timeline_rejects_invalid_month(client: AsyncClient):
    response = await client.get("/v1/timeline/2000/13")
    assert response.status_code == 422
    assert response.json()["parameter"] == "month"


@pytest.mark.asyncio
async def test_events_at_datetime_limit_is_rejected(client: AsyncClient):
    response = await client.get(
        "/v1/events",
        params={"start": "0001-01-01T00:00:00", "end": "0001-01-10T00:00:00"},
    )
    assert response.status_code == 422
    assert response.json()["parameter"] == "start"


@pytest.mark.asyncio
async def test_next_at_datetime_limit_is_rejected(client: AsyncClient):
    response = await client.get("/v1/next/full", params={"at": "9999-12-30T00:00:00"})
    assert response.status_code == 422
    assert response.json()["parameter"] == "from_instant"


@pytest.mark.asyncio
async def test_readiness_reports_unknown_timezone(client: AsyncClient, monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus_Mons")
    reset_settings_cache()
    response = await client.get("/health/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"
