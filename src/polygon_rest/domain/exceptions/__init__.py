# Copyright (c)
# SPDX-License-Identifier: MIT
"""Exception hierarchy for the Polygon REST client."""

from __future__ import annotations

from .base import DomainError
from .polygon import (
    InvalidParameterError,
    MissingApiKeyError,
    PolygonAPIError,
    PolygonDecodeError,
    PolygonError,
    PolygonTransportError,
    ToolLookupError,
)

__all__ = [
    "DomainError",
    "InvalidParameterError",
    "MissingApiKeyError",
    "PolygonAPIError",
    "PolygonDecodeError",
    "PolygonError",
    "PolygonTransportError",
    "ToolLookupError",
]
