# src/polygon_rest/tool_use/schemas.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Tool-shim schemas.

Purpose:
- Envelope models for ``call_tool`` requests and ``ToolServer`` responses.
- Parameter models for the discovery tools.
- Argument models for every callable endpoint. Their JSON Schema is what
  ``get_endpoint_schema`` returns, so field descriptions are user-facing.

Conventions:
- Required fields are the endpoint's path parameters; everything else is an
  optional query-string parameter and is only sent when provided.
- Field aliases are the wire names (``from`` for ``from_``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Order = Literal["asc", "desc"]


class _Params(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, str_strip_whitespace=True)


# --------------------------------------------------------------------------- #
# Envelopes
# --------------------------------------------------------------------------- #


class ToolRequest(BaseModel):
    """Tool invocation envelope: ``{"tool": ..., "params": {...}}``."""

    model_config = ConfigDict(extra="forbid")

    tool: str = Field(..., description="Tool name (e.g. 'list_modules').")
    params: Mapping[str, Any] | None = Field(
        default=None,
        description="Tool-specific parameters object.",
    )


class ToolError(BaseModel):
    """Structured error returned by ``ToolServer``."""

    model_config = ConfigDict(extra="forbid")

    code: str = Field(..., description="Stable error code (e.g. TOOL_LOOKUP_ERROR).")
    message: str = Field(..., description="Human-readable error message.")
    status: int | None = Field(default=None, description="Upstream HTTP status, if any.")
    request_id: str | None = Field(default=None, description="Upstream request id, if any.")


class ToolResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    result: Any | None = None
    error: ToolError | None = None


# --------------------------------------------------------------------------- #
# Discovery tool parameters
# --------------------------------------------------------------------------- #


class NoParams(_Params):
    pass


class ListEndpointsParams(_Params):
    module: str = Field(..., description="Module name (e.g. 'Aggs').")


class GetEndpointSchemaParams(_Params):
    module: str = Field(..., description="Module name (e.g. 'Aggs').")
    endpoint: str = Field(..., description="Endpoint name (e.g. 'previous_close').")


class CallEndpointParams(_Params):
    module: str = Field(..., description="Module name (e.g. 'Aggs').")
    endpoint: str = Field(..., description="Endpoint name (e.g. 'previous_close').")
    arguments: dict[str, Any] = Field(
        default_factory=dict,
        description="Endpoint arguments matching the schema from get_endpoint_schema.",
    )


# --------------------------------------------------------------------------- #
# Endpoint arguments: Aggs
# --------------------------------------------------------------------------- #


class AggregatesArgs(_Params):
    ticker: str = Field(..., min_length=1, description="Ticker symbol (e.g. 'AAPL').")
    multiplier: int = Field(..., ge=1, description="Size of the timespan multiplier.")
    timespan: str = Field(
        ...,
        description="minute, hour, day, week, month, quarter or year (abbreviations accepted).",
    )
    from_: str = Field(..., alias="from", description="Window start (YYYY-MM-DD or Unix ms).")
    to: str = Field(..., description="Window end (YYYY-MM-DD or Unix ms).")
    adjusted: bool | None = Field(default=None, description="Adjust for splits.")
    sort: Order | None = Field(default=None, description="Sort by timestamp.")
    limit: int | None = Field(default=None, ge=1, le=50000, description="Max base aggregates.")


class PreviousCloseArgs(_Params):
    ticker: str = Field(..., min_length=1, description="Ticker symbol (e.g. 'AAPL').")
    adjusted: bool | None = Field(default=None, description="Adjust for splits.")


class GroupedDailyArgs(_Params):
    date: str = Field(..., description="Trading date (YYYY-MM-DD).")
    adjusted: bool | None = Field(default=None, description="Adjust for splits.")
    include_otc: bool | None = Field(default=None, description="Include OTC securities.")


class DailyOpenCloseArgs(_Params):
    ticker: str = Field(..., min_length=1, description="Ticker symbol (e.g. 'AAPL').")
    date: str = Field(..., description="Trading date (YYYY-MM-DD).")
    adjusted: bool | None = Field(default=None, description="Adjust for splits.")


# --------------------------------------------------------------------------- #
# Endpoint arguments: Tickers
# --------------------------------------------------------------------------- #


class AllTickersArgs(_Params):
    ticker: str | None = Field(default=None, description="Exact ticker filter.")
    type: str | None = Field(default=None, description="Ticker type code (see Tickers.types).")
    market: str | None = Field(default=None, description="stocks, crypto, fx, otc or indices.")
    exchange: str | None = Field(default=None, description="Primary exchange MIC.")
    active: bool | None = Field(default=None, description="Only actively traded tickers.")
    search: str | None = Field(default=None, description="Search ticker and company name.")
    limit: int | None = Field(default=None, ge=1, le=1000, description="Page size.")
    sort: str | None = Field(default=None, description="Field to sort by.")
    order: Order | None = Field(default=None, description="Sort direction.")


class TickerDetailsArgs(_Params):
    ticker: str = Field(..., min_length=1, description="Ticker symbol (e.g. 'AAPL').")
    date: str | None = Field(default=None, description="Point-in-time date (YYYY-MM-DD).")


class RelatedArgs(_Params):
    ticker: str = Field(..., min_length=1, description="Ticker symbol (e.g. 'AAPL').")


class TickerTypesArgs(_Params):
    asset_class: str | None = Field(default=None, description="stocks, options, crypto, fx.")
    locale: str | None = Field(default=None, description="us or global.")


class TickerEventsArgs(_Params):
    ticker: str = Field(..., min_length=1, description="Ticker, CUSIP or composite FIGI.")
    types: str | None = Field(default=None, description="Comma-separated event types.")


class NewsArgs(_Params):
    ticker: str | None = Field(default=None, description="Articles mentioning this ticker.")
    published_utc: str | None = Field(default=None, description="Publication date filter.")
    limit: int | None = Field(default=None, ge=1, le=1000, description="Page size.")
    sort: str | None = Field(default=None, description="Field to sort by.")
    order: Order | None = Field(default=None, description="Sort direction.")


# --------------------------------------------------------------------------- #
# Endpoint arguments: Financials
# --------------------------------------------------------------------------- #


class StatementArgs(_Params):
    """Filters shared by balance sheets, cash flow and income statements."""

    tickers: str | None = Field(default=None, description="Ticker filter (e.g. 'AAPL').")
    cik: str | None = Field(default=None, description="SEC Central Index Key.")
    period_end: str | None = Field(default=None, description="Period end date (YYYY-MM-DD).")
    filing_date: str | None = Field(default=None, description="Filing date (YYYY-MM-DD).")
    fiscal_year: int | None = Field(default=None, description="Fiscal year.")
    fiscal_quarter: int | None = Field(default=None, ge=1, le=4, description="Fiscal quarter.")
    timeframe: Literal["quarterly", "annual", "trailing_twelve_months"] | None = Field(
        default=None, description="Reporting period type."
    )
    limit: int | None = Field(default=None, ge=1, description="Page size.")
    sort: str | None = Field(
        default=None, description="Sort key and direction, e.g. 'period_end.desc'."
    )


class RatiosArgs(_Params):
    ticker: str | None = Field(default=None, description="Ticker filter (e.g. 'AAPL').")
    cik: str | None = Field(default=None, description="SEC Central Index Key.")
    limit: int | None = Field(default=None, ge=1, description="Page size.")
    sort: str | None = Field(
        default=None, description="Sort key and direction, e.g. 'market_cap.desc'."
    )


# --------------------------------------------------------------------------- #
# Endpoint arguments: Quotes
# --------------------------------------------------------------------------- #


class LastQuoteArgs(_Params):
    ticker: str = Field(..., min_length=1, description="Ticker symbol (e.g. 'AAPL').")


class LastForexQuoteArgs(_Params):
    from_: str = Field(..., alias="from", min_length=1, description="Base currency (e.g. 'USD').")
    to: str = Field(..., min_length=1, description="Quote currency (e.g. 'EUR').")
