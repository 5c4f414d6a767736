# Copyright (c)
# SPDX-License-Identifier: MIT
"""Aggregate (OHLCV bar) records and their decoders.

The wire format uses single-letter keys (``o``, ``h``, ``l``, ``c``, ``v``,
``vw``, ``t``, ``n``, ``T``); records expose descriptive attribute names and
accept either spelling on input.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import (
    Bool,
    Float,
    Int,
    Record,
    Str,
    decode_document,
    decode_results_list,
)


class Agg(Record):
    """One aggregate bar over a custom time window."""

    open: Float | None = Field(default=None, alias="o")
    high: Float | None = Field(default=None, alias="h")
    low: Float | None = Field(default=None, alias="l")
    close: Float | None = Field(default=None, alias="c")
    volume: Float | None = Field(default=None, alias="v")
    vwap: Float | None = Field(default=None, alias="vw")
    timestamp: Int | None = Field(default=None, alias="t", description="Window start, Unix ms.")
    transactions: Int | None = Field(default=None, alias="n")
    otc: Bool | None = None


class PreviousCloseAgg(Record):
    """Previous trading day's bar for a single ticker."""

    ticker: Str | None = Field(default=None, alias="T")
    close: Float | None = Field(default=None, alias="c")
    high: Float | None = Field(default=None, alias="h")
    low: Float | None = Field(default=None, alias="l")
    open: Float | None = Field(default=None, alias="o")
    timestamp: Int | None = Field(default=None, alias="t")
    volume: Float | None = Field(default=None, alias="v")
    vwap: Float | None = Field(default=None, alias="vw")


class GroupedDailyAgg(Agg):
    """Daily bar for one ticker in a whole-market grouped response."""

    ticker: Str | None = Field(default=None, alias="T")


class DailyOpenCloseAgg(Record):
    """Open, close and extended-hours prices for one ticker on one date.

    This endpoint has no ``results`` envelope; the document is the record.
    """

    after_hours: Float | None = Field(default=None, alias="afterHours")
    close: Float | None = None
    from_: Str | None = Field(default=None, alias="from")
    high: Float | None = None
    low: Float | None = None
    open: Float | None = None
    pre_market: Float | None = Field(default=None, alias="preMarket")
    status: Str | None = None
    symbol: Str | None = None
    volume: Float | None = None
    otc: Bool | None = None


def decode_aggregates(doc: Any) -> list[Agg]:
    """Decode the ``results`` list of a custom-range aggregates response."""
    return decode_results_list(doc, Agg)


def decode_previous_close(doc: Any) -> list[PreviousCloseAgg]:
    """Decode the previous-day bar (a one-element ``results`` list)."""
    return decode_results_list(doc, PreviousCloseAgg)


def decode_grouped_daily(doc: Any) -> list[GroupedDailyAgg]:
    """Decode one bar per ticker for a whole market day."""
    return decode_results_list(doc, GroupedDailyAgg)


def decode_daily_open_close(doc: Any) -> DailyOpenCloseAgg:
    """Decode the open/close document, which has no ``results`` envelope."""
    return decode_document(doc, DailyOpenCloseAgg)
