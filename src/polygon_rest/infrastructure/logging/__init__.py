"""JSON logging helpers."""

from __future__ import annotations

from .logger import configure_root_logging, get_json_logger, get_request_id, set_request_context

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "get_request_id",
    "set_request_context",
]
