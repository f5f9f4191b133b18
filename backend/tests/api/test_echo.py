"""Echo route — message round-trip and missing-parameter error."""

import asyncio
from datetime import datetime, timezone

import pytest

MISSING = "Missing 'message' query parameter"


def _parse(ts: str) -> datetime:
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


@pytest.mark.parametrize("message", [
    "hello",
    "with spaces and punctuation!?",
    "a&b=c#d/e%f",
    "ünïcødé ✓ 日本語",
    '{"json": "looking"}',
])
async def test_echo_returns_message_verbatim(client, message):
    before = datetime.now(timezone.utc)
    res = await client.get("/api/echo", params={"message": message})
    after = datetime.now(timezone.utc)

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == message
    assert before <= _parse(body["timestamp"]) <= after


async def test_echo_without_message_returns_400(client):
    res = await client.get("/api/echo")
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == MISSING
    assert "timestamp" in body


async def test_echo_with_empty_message_returns_400(client):
    res = await client.get("/api/echo?message=")
    assert res.status_code == 400
    assert res.json()["error"] == MISSING


async def test_concurrent_echoes_do_not_interfere(client):
    messages = [f"message-{i}" for i in range(25)]
    responses = await asyncio.gather(*(
        client.get("/api/echo", params={"message": m}) for m in messages
    ))
    assert [r.json()["message"] for r in responses] == messages


async def test_repeated_message_uses_first_value(client):
    res = await client.get("/api/echo?message=first&message=second")
    assert res.status_code == 200
    assert res.json()["message"] == "first"


async def test_repeated_message_with_empty_first_returns_400(client):
    res = await client.get("/api/echo?message=&message=x")
    assert res.status_code == 400
    assert res.json()["error"] == MISSING
