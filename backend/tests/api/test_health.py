"""Health route — status, uptime string, constant version."""

import asyncio
import re

from app.core.runtime import VERSION

_UNIT_SECONDS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 1e-3, "µs": 1e-6}
_PART = re.compile(r"([\d.]+)(h|ms|µs|m|s)")


def _to_seconds(uptime: str) -> float:
    return sum(float(n) * _UNIT_SECONDS[u] for n, u in _PART.findall(uptime))


async def test_health_reports_healthy(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["version"] == VERSION
    assert list(body) == ["status", "uptime", "version"]


async def test_health_uptime_is_duration_string(client):
    res = await client.get("/health")
    assert re.fullmatch(r"(\d+h)?(\d+m)?[\d.]+(s|ms|µs)", res.json()["uptime"])


async def test_health_uptime_never_decreases(client):
    first = _to_seconds((await client.get("/health")).json()["uptime"])
    await asyncio.sleep(0.02)
    second = _to_seconds((await client.get("/health")).json()["uptime"])
    assert second >= first


async def test_version_is_constant_across_endpoints(client):
    versions = {
        (await client.get("/")).json()["version"],
        (await client.get("/health")).json()["version"],
        (await client.get("/api/info")).json()["version"],
    }
    assert versions == {VERSION}


async def test_health_answers_any_method(client):
    res = await client.post("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
