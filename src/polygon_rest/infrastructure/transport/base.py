# Copyright (c)
# SPDX-License-Identifier: MIT
"""Transport capability contract.

Anything that can perform an HTTP GET and a JSON POST and hand back the
response body as text satisfies :class:`Transport`. The query builder depends
only on this protocol, so tests and callers can substitute an in-memory
implementation for the default httpx-backed one.

Failure contract:
    * Network failure or timeout: ``PolygonTransportError``.
    * Non-success HTTP status: ``PolygonAPIError`` (status, body, request id).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Minimal async HTTP capability used by every query."""

    async def get(self, url: str) -> str:
        """Issue a GET request and return the response body."""
        ...

    async def post(self, url: str, body: str) -> str:
        """Issue a POST with a JSON body and return the response body."""
        ...
