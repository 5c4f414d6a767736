# Copyright (c)
# SPDX-License-Identifier: MIT
"""Fundamental financial statement endpoints.

All four endpoints share the filter vocabulary below. Range filters use the
``.gt``, ``.gte``, ``.lt``, ``.lte`` suffixes, and ``.any_of`` takes a comma-separated list,
for example ``query.param("fiscal_year.gte", 2020)``.

Statements: ``cik``, ``tickers``, ``period_end``, ``filing_date``,
``fiscal_year``, ``fiscal_quarter``, ``timeframe``, ``limit``, ``sort``.

Ratios: ``ticker``, ``cik``, ``price``, ``average_volume``, ``market_cap``,
``earnings_per_share``, ``price_to_earnings``, ``price_to_book``,
``price_to_sales``, ``limit``, ``sort``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polygon_rest.query import Query
from polygon_rest.schemas.financials import (
    decode_balance_sheets,
    decode_cash_flow_statements,
    decode_income_statements,
    decode_ratios,
)

if TYPE_CHECKING:
    from polygon_rest.client import Polygon

_BASE = "/stocks/financials/v1"


def balance_sheets(client: Polygon) -> Query[str]:
    """Balance sheets; filter with ``tickers``, ``cik``, ``timeframe``, ``limit`` and ``sort``."""
    return Query(client, f"{_BASE}/balance-sheets", decoder=decode_balance_sheets)


def cash_flow_statements(client: Polygon) -> Query[str]:
    """Cash-flow statements; accepts the same filters as :func:`balance_sheets`."""
    return Query(client, f"{_BASE}/cash-flow-statements", decoder=decode_cash_flow_statements)


def income_statements(client: Polygon) -> Query[str]:
    """Income statements; accepts the same filters as :func:`balance_sheets`."""
    return Query(client, f"{_BASE}/income-statements", decoder=decode_income_statements)


def ratios(client: Polygon) -> Query[str]:
    """Latest valuation and profitability ratios per ticker."""
    return Query(client, f"{_BASE}/ratios", decoder=decode_ratios)
