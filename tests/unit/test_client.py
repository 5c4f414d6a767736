# tests/unit/test_client.py
from __future__ import annotations

import pytest

from polygon_rest.client import Polygon
from polygon_rest.config.settings import DEFAULT_BASE_URL, PolygonSettings
from polygon_rest.domain.exceptions import MissingApiKeyError
from polygon_rest.infrastructure.transport import HttpxTransport
from tests.fakes import FakeTransport


def test_from_env_reads_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLYGON_API_KEY", "env-key")
    client = Polygon.from_env(transport=FakeTransport())
    assert client.api_key == "env-key"
    assert client.base_url == DEFAULT_BASE_URL


def test_from_env_without_key_raises() -> None:
    with pytest.raises(MissingApiKeyError):
        Polygon.from_env(transport=FakeTransport())


def test_default_transport_is_httpx() -> None:
    client = Polygon("k", settings=PolygonSettings())
    assert isinstance(client.transport, HttpxTransport)


def test_with_key_and_with_transport_return_new_clients(settings: PolygonSettings) -> None:
    t1, t2 = FakeTransport(), FakeTransport()
    base = Polygon(None, transport=t1, settings=settings)

    keyed = base.with_key("new")
    moved = keyed.with_transport(t2)

    assert base.api_key is None
    assert keyed.api_key == "new" and keyed.transport is t1
    assert moved.api_key == "new" and moved.transport is t2


def test_require_key(settings: PolygonSettings) -> None:
    with pytest.raises(MissingApiKeyError):
        Polygon("", transport=FakeTransport(), settings=settings).require_key()
    assert Polygon("k", transport=FakeTransport(), settings=settings).require_key() == "k"


def test_repr_hides_key(settings: PolygonSettings) -> None:
    assert "secret" not in repr(Polygon("secret", transport=FakeTransport(), settings=settings))


@pytest.mark.anyio
async def test_context_manager_closes_owned_transport_only(settings: PolygonSettings) -> None:
    class Closable(FakeTransport):
        closed: bool = False

        async def aclose(self) -> None:
            self.closed = True

    injected = Closable()
    async with Polygon("k", transport=injected, settings=settings):
        pass
    assert injected.closed is False

    owned = Polygon("k", settings=settings)
    async with owned:
        pass
    assert owned.transport._client.is_closed  # type: ignore[attr-defined]
