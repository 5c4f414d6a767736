# Copyright (c)
# SPDX-License-Identifier: MIT
"""Async query-builder client for the Polygon.io market-data REST API.

Typical usage:
    from polygon_rest import Polygon
    from polygon_rest.rest import aggs

    async with Polygon.from_env() as client:
        bars = await aggs.previous_close(client, "AAPL").decoded().get()
"""

from __future__ import annotations

from polygon_rest.client import Polygon
from polygon_rest.config.settings import PolygonSettings, get_settings
from polygon_rest.domain.exceptions import (
    InvalidParameterError,
    MissingApiKeyError,
    PolygonAPIError,
    PolygonDecodeError,
    PolygonError,
    PolygonTransportError,
    ToolLookupError,
)
from polygon_rest.infrastructure.transport import HttpxTransport, Transport
from polygon_rest.processors import to_table
from polygon_rest.query import Query

__all__ = [
    "HttpxTransport",
    "InvalidParameterError",
    "MissingApiKeyError",
    "Polygon",
    "PolygonAPIError",
    "PolygonDecodeError",
    "PolygonError",
    "PolygonSettings",
    "PolygonTransportError",
    "Query",
    "ToolLookupError",
    "Transport",
    "get_settings",
    "to_table",
]

__version__ = "0.1.0"
