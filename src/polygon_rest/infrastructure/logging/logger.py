# src/polygon_rest/infrastructure/logging/logger.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structured JSON logging for the Polygon client.

The library itself never configures logging; it only asks for named loggers.
Applications (and the bundled CLI) call :func:`configure_root_logging` once.

Every line carries ``ts``, ``level``, ``logger`` and ``message``. A caller may
bind a correlation id for the current task with :func:`set_request_context`;
it is then attached to every line emitted from that task, which makes
concurrent ``Query.get()`` calls distinguishable in the output.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
    log.info("query.sent", extra={"extra": {"path": "/v2/aggs/..."}})
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "set_request_context",
    "get_request_id",
]

_REQUEST_ID_ENV_KEY = "REQUEST_ID"

_REQUEST_ID_CTX: ContextVar[str | None] = ContextVar("polygon_request_id", default=None)


def set_request_context(*, request_id: str | None) -> None:
    """Bind (or clear, with ``None``) the correlation id for the current task."""
    _REQUEST_ID_CTX.set(request_id)


def get_request_id() -> str | None:
    """Return the correlation id bound to the current task, if any."""
    return _REQUEST_ID_CTX.get(None)


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Record attribute wins over contextvar, contextvar over env.
        rid: str | None = (
            getattr(record, "request_id", None)
            or _REQUEST_ID_CTX.get(None)
            or os.getenv(_REQUEST_ID_ENV_KEY)
        )
        if rid:
            payload["request_id"] = rid

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None) -> None:
    """Install a JSON stream handler on the root logger (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL``
            or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "INFO")
    )
    root.setLevel(resolved)

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module logger that propagates to the JSON root handler.

    Args:
        name: Logger name, typically ``__name__`` of the caller.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
