# Copyright (c)
# SPDX-License-Identifier: MIT
"""Typed response records.

Purpose:
    * base: record base class and envelope helpers.
    * aggs: aggregate bars.
    * tickers: reference data, ticker events and news.
    * financials: balance sheets, cash flows, income statements and ratios.
"""

from __future__ import annotations

from .aggs import Agg, DailyOpenCloseAgg, GroupedDailyAgg, PreviousCloseAgg
from .base import Record
from .financials import BalanceSheet, CashFlowStatement, FinancialRatio, IncomeStatement
from .tickers import (
    Branding,
    CompanyAddress,
    Insight,
    Publisher,
    RelatedCompany,
    Ticker,
    TickerChange,
    TickerChangeEvent,
    TickerChangeResults,
    TickerNews,
    TickerType,
)

__all__ = [
    "Agg",
    "BalanceSheet",
    "Branding",
    "CashFlowStatement",
    "CompanyAddress",
    "DailyOpenCloseAgg",
    "FinancialRatio",
    "GroupedDailyAgg",
    "IncomeStatement",
    "Insight",
    "PreviousCloseAgg",
    "Publisher",
    "Record",
    "RelatedCompany",
    "Ticker",
    "TickerChange",
    "TickerChangeEvent",
    "TickerChangeResults",
    "TickerNews",
    "TickerType",
]
