# tests/unit/domain/test_polygon_exceptions.py
from __future__ import annotations

import pytest

from polygon_rest.domain.exceptions import (
    DomainError,
    InvalidParameterError,
    MissingApiKeyError,
    PolygonAPIError,
    PolygonDecodeError,
    PolygonError,
    PolygonTransportError,
    ToolLookupError,
)


@pytest.mark.parametrize(
    ("exc_type", "code"),
    [
        (PolygonTransportError, "TRANSPORT_ERROR"),
        (PolygonDecodeError, "DECODE_ERROR"),
        (ToolLookupError, "TOOL_LOOKUP_ERROR"),
        (MissingApiKeyError, "MISSING_API_KEY"),
        (InvalidParameterError, "INVALID_PARAMETER"),
    ],
)
def test_error_codes_are_stable(exc_type: type[PolygonError], code: str) -> None:
    err = exc_type("x")
    assert err.code == code
    assert isinstance(err, PolygonError)
    assert isinstance(err, DomainError)


def test_api_error_carries_status_body_and_request_id() -> None:
    err = PolygonAPIError(429, '{"status":"ERROR"}', request_id="r-1")
    assert err.code == "API_ERROR"
    assert err.details == {"status": 429, "request_id": "r-1"}
    assert str(err) == 'API error 429: {"status":"ERROR"} (request_id=r-1)'
    assert err.to_dict()["code"] == "API_ERROR"


def test_decode_error_message_prefix() -> None:
    assert str(PolygonDecodeError("missing field `results`")) == (
        "Decode error: missing field `results`"
    )


def test_missing_api_key_has_default_message() -> None:
    assert "POLYGON_API_KEY" in str(MissingApiKeyError())


def test_builtin_compatibility() -> None:
    assert issubclass(InvalidParameterError, TypeError)
    assert issubclass(ToolLookupError, LookupError)
