"""Error handlers — domain, validation and catch-all layers render ErrorBody."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.api.error_handlers import register_error_handlers
from app.core.errors import MethodNotAllowedError


@pytest.fixture
async def handler_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/domain")
    async def domain():
        raise MethodNotAllowedError("POST")

    @app.get("/typed")
    async def typed(count: int):
        return {"count": count}

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_domain_error_uses_its_status(handler_client):
    res = await handler_client.get("/domain")
    assert res.status_code == 405
    assert res.json()["error"] == "Method not allowed. Use POST"


async def test_validation_error_maps_to_400(handler_client):
    res = await handler_client.get("/typed", params={"count": "many"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"


async def test_unhandled_error_never_leaks_details(handler_client):
    res = await handler_client.get("/boom")
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "An unexpected error occurred"
    assert "secret" not in res.text
    assert set(body) == {"error", "timestamp"}
