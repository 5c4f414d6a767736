# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Polygon Client Exceptions

Purpose:
    Error kinds surfaced by the transport, the decoding layer, the tool shim
    and client configuration. Nothing here is retried or recovered internally;
    every failure propagates to the caller of ``Query.get()`` / ``call_tool``.

Layer: domain/exceptions
"""
from __future__ import annotations

from typing import Any

from .base import DomainError


class PolygonError(DomainError):
    """Root of the library's error hierarchy."""

    code = "POLYGON_ERROR"


class PolygonTransportError(PolygonError):
    """Network failure or timeout while talking to the remote service."""

    code = "TRANSPORT_ERROR"


class PolygonAPIError(PolygonTransportError):
    """The remote service answered with a non-success HTTP status."""

    code = "API_ERROR"

    def __init__(
        self,
        status: int,
        message: str = "",
        *,
        request_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = {"status": status, "request_id": request_id}
        merged.update(details or {})
        super().__init__(message, details=merged)
        self.status = status
        self.request_id = request_id

    def __str__(self) -> str:
        suffix = f" (request_id={self.request_id})" if self.request_id else ""
        return f"API error {self.status}: {self.message}{suffix}"


class PolygonDecodeError(PolygonError):
    """Response text is not valid JSON or does not match the expected record shape."""

    code = "DECODE_ERROR"

    def __str__(self) -> str:
        return f"Decode error: {self.message}"


class ToolLookupError(PolygonError, LookupError):
    """Unknown tool, module or endpoint name passed to the tool shim."""

    code = "TOOL_LOOKUP_ERROR"


class MissingApiKeyError(PolygonError):
    """An operation needs an API key but none is configured."""

    code = "MISSING_API_KEY"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message or "API key is not set; pass api_key=... or export POLYGON_API_KEY",
            details=details,
        )


class InvalidParameterError(PolygonError, TypeError):
    """Parameter value has an unsupported type or a required parameter is missing."""

    code = "INVALID_PARAMETER"
