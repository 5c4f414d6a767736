# src/polygon_rest/client.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Polygon client context.

A :class:`Polygon` bundles the three things every query needs: the API key,
the service base URL, and a :class:`~polygon_rest.infrastructure.transport.Transport`.
It holds no per-request state, so one instance can serve any number of
concurrent ``Query.get()`` calls.

Typical usage:
    async with Polygon.from_env() as client:
        bars = await aggs.previous_close(client, "AAPL").decoded().get()
"""

from __future__ import annotations

from types import TracebackType

from polygon_rest.config.settings import PolygonSettings, get_settings
from polygon_rest.domain.exceptions import MissingApiKeyError
from polygon_rest.infrastructure.transport import HttpxTransport, Transport


class Polygon:
    """Client context shared by every catalog call."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        transport: Transport | None = None,
        settings: PolygonSettings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key sent as ``apiKey`` on every request. May be
                omitted; queries then fail with ``MissingApiKeyError``.
            transport: Transport to execute requests with. When omitted an
                :class:`HttpxTransport` is created and owned by this client.
            settings: Settings for base URL and default transport; falls back
                to :func:`get_settings`.
        """
        self._settings = settings or get_settings()
        self._api_key = api_key or None
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(self._settings)

    @classmethod
    def from_env(
        cls,
        *,
        transport: Transport | None = None,
        settings: PolygonSettings | None = None,
    ) -> Polygon:
        """Build a client whose key comes from ``POLYGON_API_KEY`` (or ``.env``).

        Raises:
            MissingApiKeyError: If no key is configured.
        """
        resolved = settings or get_settings()
        if resolved.api_key is None:
            raise MissingApiKeyError()
        return cls(resolved.api_key.get_secret_value(), transport=transport, settings=resolved)

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def settings(self) -> PolygonSettings:
        return self._settings

    def with_key(self, api_key: str) -> Polygon:
        """Return a client using ``api_key`` and sharing this client's transport."""
        return Polygon(api_key, transport=self._transport, settings=self._settings)

    def with_transport(self, transport: Transport) -> Polygon:
        """Return a client with the same key executing through ``transport``."""
        return Polygon(self._api_key, transport=transport, settings=self._settings)

    def require_key(self) -> str:
        """Return the API key or raise ``MissingApiKeyError``."""
        if not self._api_key:
            raise MissingApiKeyError()
        return self._api_key

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            aclose = getattr(self._transport, "aclose", None)
            if aclose is not None:
                await aclose()

    async def __aenter__(self) -> Polygon:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        key_state = "set" if self._api_key else "unset"
        return f"Polygon(base_url={self.base_url!r}, api_key={key_state})"
