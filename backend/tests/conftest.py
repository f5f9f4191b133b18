"""Root conftest — shared test configuration."""

import pytest

from app.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are lru_cached; every test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
