"""
Config package export.

Keeps import sites clean and stable:
    from polygon_rest.config import get_settings, PolygonSettings
"""

from __future__ import annotations

from .settings import DEFAULT_BASE_URL, PolygonSettings, get_settings

__all__ = ["DEFAULT_BASE_URL", "PolygonSettings", "get_settings"]
