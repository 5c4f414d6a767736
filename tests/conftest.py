# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator

import pytest

from polygon_rest.client import Polygon
from polygon_rest.config.settings import PolygonSettings, get_settings
from tests.fakes import FakeTransport

TEST_BASE_URL = "https://api.polygon.test"
TEST_API_KEY = "test-key"


@pytest.fixture
def anyio_backend() -> str:
    """Force pytest-anyio to use asyncio (not trio)."""
    return "asyncio"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep developer env vars and .env files out of every test."""
    for name in ("POLYGON_API_KEY", "POLYGON_BASE_URL", "POLYGON_TIMEOUT_S", "POLYGON_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> PolygonSettings:
    return PolygonSettings(base_url=TEST_BASE_URL)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport, settings: PolygonSettings) -> Polygon:
    return Polygon(TEST_API_KEY, transport=transport, settings=settings)
