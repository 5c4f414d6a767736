# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import json
import logging

import anyio
import pytest

from polygon_rest.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_json_logger,
    get_request_id,
    set_request_context,
)


def _capture_log(record_msg: str, level: int = logging.INFO, **extra) -> dict:
    """Format a record with the JSON formatter and return the parsed payload."""
    logger = logging.getLogger("test.logger")
    fmt = _JsonFormatter()
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=1,
        msg=record_msg,
        args=(),
        exc_info=None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return json.loads(fmt.format(record))


def test_configure_root_logging_installs_json_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    saved = list(root.handlers)
    root.handlers.clear()
    try:
        configure_root_logging()
        configure_root_logging()  # idempotent
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, _JsonFormatter)
    finally:
        root.handlers[:] = saved


def test_json_formatter_basic_fields() -> None:
    payload = _capture_log("hello-world")
    assert payload["message"] == "hello-world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload


def test_json_formatter_merges_extra_dict() -> None:
    payload = _capture_log("polygon.query.get", extra={"path": "/v2/aggs/ticker/AAPL/prev"})
    assert payload["path"] == "/v2/aggs/ticker/AAPL/prev"


def test_request_id_prefers_record_then_context_then_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REQUEST_ID", "from-env")
    set_request_context(request_id=None)
    assert _capture_log("x")["request_id"] == "from-env"

    set_request_context(request_id="from-ctx")
    try:
        assert _capture_log("x")["request_id"] == "from-ctx"
        assert _capture_log("x", request_id="from-record")["request_id"] == "from-record"
    finally:
        set_request_context(request_id=None)


def test_exception_info_is_rendered() -> None:
    logger = logging.getLogger("test.logger")
    try:
        raise ValueError("boom")
    except ValueError:
        import sys

        record = logger.makeRecord(
            logger.name, logging.ERROR, "f", 1, "failed", (), sys.exc_info()
        )
    payload = json.loads(_JsonFormatter().format(record))
    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


@pytest.mark.anyio
async def test_request_context_is_task_local() -> None:
    seen: dict[str, str | None] = {}

    async def worker(name: str) -> None:
        set_request_context(request_id=name)
        await anyio.sleep(0)
        seen[name] = get_request_id()

    async with anyio.create_task_group() as tg:
        tg.start_soon(worker, "a")
        tg.start_soon(worker, "b")

    assert seen == {"a": "a", "b": "b"}


def test_get_json_logger_propagates() -> None:
    log = get_json_logger("polygon_rest.something")
    assert log.propagate is True
