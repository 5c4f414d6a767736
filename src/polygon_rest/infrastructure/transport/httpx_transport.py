# src/polygon_rest/infrastructure/transport/httpx_transport.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Default transport backed by ``httpx.AsyncClient``.

This is the only module that touches httpx. Responses and exceptions are
translated at this boundary so callers only ever see text bodies or the
library's own error types:

* ``httpx.TimeoutException`` / ``httpx.RequestError`` -> ``PolygonTransportError``
* any status outside 2xx -> ``PolygonAPIError`` carrying the raw body

There are no retries, no backoff and no caching.
"""

from __future__ import annotations

import re
import time
from types import TracebackType
from typing import Final

import httpx

from polygon_rest.config.settings import PolygonSettings, get_settings
from polygon_rest.domain.exceptions import PolygonAPIError, PolygonTransportError
from polygon_rest.infrastructure.logging.logger import get_json_logger

log = get_json_logger(__name__)

_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
}

_API_KEY_RE = re.compile(r"(apiKey=)[^&]*")


def redact_api_key(url: str) -> str:
    """Return ``url`` with the ``apiKey`` query value masked."""
    return _API_KEY_RE.sub(r"\1***", url)


def _request_id(response: httpx.Response) -> str | None:
    # httpx headers are case-insensitive.
    return response.headers.get("x-request-id")


class HttpxTransport:
    """Async HTTP transport for the Polygon REST API."""

    def __init__(
        self,
        settings: PolygonSettings | None = None,
        *,
        http: httpx.AsyncClient | None = None,
        timeout_s: float | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            settings: Client settings; ``get_settings()`` when omitted.
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned by this instance.
            timeout_s: Per-request timeout override in seconds.
        """
        self._settings = settings or get_settings()
        self._timeout = float(timeout_s if timeout_s is not None else self._settings.timeout_s)

        headers = dict(_DEFAULT_HEADERS)
        headers["User-Agent"] = self._settings.user_agent

        # Sent on every request so an injected client gets them too.
        self._headers = headers
        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(timeout=self._timeout)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ---------------------------- Public API ----------------------------- #

    async def get(self, url: str) -> str:
        """Issue a GET request and return the response text."""
        return await self._send("GET", url)

    async def post(self, url: str, body: str) -> str:
        """Issue a POST request with a JSON body and return the response text."""
        return await self._send(
            "POST",
            url,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    # --------------------------- Internal helpers ------------------------- #

    async def _send(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        safe_url = redact_api_key(url)
        started = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                url,
                content=content,
                headers={**self._headers, **(headers or {})},
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            log.warning(
                "polygon.transport.timeout",
                extra={"extra": {"method": method, "url": safe_url}},
            )
            raise PolygonTransportError(
                f"timeout after {self._timeout}s",
                details={"method": method, "url": safe_url},
            ) from exc
        except httpx.RequestError as exc:
            log.warning(
                "polygon.transport.error",
                extra={"extra": {"method": method, "url": safe_url, "error": str(exc)}},
            )
            raise PolygonTransportError(
                str(exc) or type(exc).__name__,
                details={"method": method, "url": safe_url},
            ) from exc

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        log.debug(
            "polygon.transport.response",
            extra={
                "extra": {
                    "method": method,
                    "url": safe_url,
                    "status": response.status_code,
                    "elapsed_ms": elapsed_ms,
                }
            },
        )

        if not response.is_success:
            raise PolygonAPIError(
                response.status_code,
                response.text,
                request_id=_request_id(response),
                details={"url": safe_url},
            )
        return response.text
