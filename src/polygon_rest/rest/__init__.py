# Copyright (c)
# SPDX-License-Identifier: MIT
"""Endpoint catalog.

Each function takes the client plus the endpoint's required path parameters
and returns a :class:`~polygon_rest.query.Query`. Nothing is sent until
``await query.get()``.

Families:
    * aggs: aggregates, previous_close, grouped_daily, daily_open_close
    * tickers: all, details, related, types, events, news
    * financials: balance_sheets, cash_flow_statements, income_statements, ratios
    * quotes: last_quote, last_forex_quote
"""

from __future__ import annotations

from . import aggs, financials, quotes, tickers
from .common import Timespan

__all__ = ["Timespan", "aggs", "financials", "quotes", "tickers"]
