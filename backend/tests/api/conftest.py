"""API test fixtures — FastAPI app served in-process through httpx.

Invariants:
    - Every test gets a freshly built app (create_app), no network involved
    - ASGITransport reports the peer as 127.0.0.1:123
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
