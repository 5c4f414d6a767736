# tests/unit/schemas/test_aggs_schemas.py
from __future__ import annotations

import pytest

from polygon_rest.domain.exceptions import PolygonDecodeError
from polygon_rest.schemas.aggs import (
    Agg,
    DailyOpenCloseAgg,
    decode_aggregates,
    decode_daily_open_close,
    decode_grouped_daily,
    decode_previous_close,
)


def test_aggregates_maps_short_keys() -> None:
    doc = {
        "ticker": "AAPL",
        "results": [
            {"o": 1.0, "h": 2.0, "l": 0.5, "c": 1.5, "v": 1000, "vw": 1.2, "t": 1704067200000, "n": 12}
        ],
    }
    [bar] = decode_aggregates(doc)
    assert bar == Agg(
        open=1.0,
        high=2.0,
        low=0.5,
        close=1.5,
        volume=1000.0,
        vwap=1.2,
        timestamp=1704067200000,
        transactions=12,
    )
    assert bar.otc is None


def test_previous_close_minimal() -> None:
    [rec] = decode_previous_close({"status": "OK", "results": [{"c": 150.0}]})
    assert rec.close == 150.0
    assert rec.ticker is None


def test_grouped_daily_reads_ticker_from_capital_t() -> None:
    [rec] = decode_grouped_daily({"results": [{"T": "MSFT", "c": 400.5, "otc": False}]})
    assert rec.ticker == "MSFT"
    assert rec.otc is False


def test_daily_open_close_decodes_whole_document() -> None:
    rec = decode_daily_open_close(
        {
            "status": "OK",
            "from": "2024-01-09",
            "symbol": "AAPL",
            "open": 183.9,
            "close": 185.1,
            "afterHours": 185.3,
            "preMarket": 183.0,
        }
    )
    assert rec == DailyOpenCloseAgg(
        status="OK",
        from_="2024-01-09",
        symbol="AAPL",
        open=183.9,
        close=185.1,
        after_hours=185.3,
        pre_market=183.0,
    )


def test_missing_results_is_decode_error() -> None:
    with pytest.raises(PolygonDecodeError, match="results"):
        decode_previous_close({"status": "OK"})


def test_results_must_be_a_list() -> None:
    with pytest.raises(PolygonDecodeError):
        decode_aggregates({"results": {"c": 1.0}})


def test_string_number_is_rejected() -> None:
    with pytest.raises(PolygonDecodeError):
        decode_previous_close({"results": [{"c": "150.0"}]})


def test_float_timestamp_is_rejected() -> None:
    with pytest.raises(PolygonDecodeError):
        decode_aggregates({"results": [{"t": 1.5}]})


def test_unknown_keys_are_ignored() -> None:
    [rec] = decode_aggregates({"results": [{"c": 1.0, "zz": "extra"}]})
    assert rec.close == 1.0


def test_records_are_frozen() -> None:
    [rec] = decode_aggregates({"results": [{"c": 1.0}]})
    with pytest.raises(Exception):  # noqa: B017 - pydantic raises ValidationError
        rec.close = 2.0  # type: ignore[misc]
