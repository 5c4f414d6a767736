# Copyright (c)
# SPDX-License-Identifier: MIT
"""Fundamental financial statement records.

Every monetary or ratio value is optional: issuers report different line
items, and trailing-twelve-month rows omit some fields entirely.
"""

from __future__ import annotations

from typing import Any

from .base import Float, Record, Str, decode_results_list


class _StatementPeriod(Record):
    """Identification fields shared by every statement row."""

    cik: Str | None = None
    tickers: list[Str] | None = None
    filing_date: Str | None = None
    period_end: Str | None = None
    fiscal_year: Float | None = None
    fiscal_quarter: Float | None = None
    timeframe: Str | None = None


class BalanceSheet(_StatementPeriod):
    accounts_payable: Float | None = None
    accrued_and_other_current_liabilities: Float | None = None
    accumulated_other_comprehensive_income: Float | None = None
    additional_paid_in_capital: Float | None = None
    cash_and_equivalents: Float | None = None
    commitments_and_contingencies: Float | None = None
    common_stock: Float | None = None
    debt_current: Float | None = None
    deferred_revenue_current: Float | None = None
    goodwill: Float | None = None
    intangible_assets_net: Float | None = None
    inventories: Float | None = None
    long_term_debt_and_capital_lease_obligations: Float | None = None
    noncontrolling_interest: Float | None = None
    other_assets: Float | None = None
    other_current_assets: Float | None = None
    other_equity: Float | None = None
    other_noncurrent_liabilities: Float | None = None
    preferred_stock: Float | None = None
    property_plant_equipment_net: Float | None = None
    receivables: Float | None = None
    retained_earnings_deficit: Float | None = None
    short_term_investments: Float | None = None
    total_assets: Float | None = None
    total_current_assets: Float | None = None
    total_current_liabilities: Float | None = None
    total_equity: Float | None = None
    total_equity_attributable_to_parent: Float | None = None
    total_liabilities: Float | None = None
    total_liabilities_and_equity: Float | None = None
    treasury_stock: Float | None = None


class CashFlowStatement(_StatementPeriod):
    cash_from_operating_activities_continuing_operations: Float | None = None
    change_in_cash_and_equivalents: Float | None = None
    change_in_other_operating_assets_and_liabilities_net: Float | None = None
    depreciation_depletion_and_amortization: Float | None = None
    dividends: Float | None = None
    effect_of_currency_exchange_rate: Float | None = None
    income_loss_from_discontinued_operations: Float | None = None
    long_term_debt_issuances_repayments: Float | None = None
    net_cash_from_financing_activities: Float | None = None
    net_cash_from_financing_activities_continuing_operations: Float | None = None
    net_cash_from_financing_activities_discontinued_operations: Float | None = None
    net_cash_from_investing_activities: Float | None = None
    net_cash_from_investing_activities_continuing_operations: Float | None = None
    net_cash_from_investing_activities_discontinued_operations: Float | None = None
    net_cash_from_operating_activities: Float | None = None
    net_cash_from_operating_activities_discontinued_operations: Float | None = None
    net_income: Float | None = None
    noncontrolling_interests: Float | None = None
    other_cash_adjustments: Float | None = None
    other_financing_activities: Float | None = None
    other_investing_activities: Float | None = None
    other_operating_activities: Float | None = None
    purchase_of_property_plant_and_equipment: Float | None = None
    sale_of_property_plant_and_equipment: Float | None = None
    short_term_debt_issuances_repayments: Float | None = None


class IncomeStatement(_StatementPeriod):
    basic_earnings_per_share: Float | None = None
    basic_shares_outstanding: Float | None = None
    consolidated_net_income_loss: Float | None = None
    cost_of_revenue: Float | None = None
    depreciation_depletion_amortization: Float | None = None
    diluted_earnings_per_share: Float | None = None
    diluted_shares_outstanding: Float | None = None
    discontinued_operations: Float | None = None
    ebitda: Float | None = None
    equity_in_affiliates: Float | None = None
    extraordinary_items: Float | None = None
    gross_profit: Float | None = None
    income_before_income_taxes: Float | None = None
    income_taxes: Float | None = None
    interest_expense: Float | None = None
    interest_income: Float | None = None
    net_income_loss_attributable_common_shareholders: Float | None = None
    noncontrolling_interest: Float | None = None
    operating_income: Float | None = None
    other_income_expense: Float | None = None
    other_operating_expenses: Float | None = None
    preferred_stock_dividends_declared: Float | None = None
    research_development: Float | None = None
    revenue: Float | None = None
    selling_general_administrative: Float | None = None
    total_operating_expenses: Float | None = None
    total_other_income_expense: Float | None = None


class FinancialRatio(Record):
    """Valuation, liquidity and leverage ratios for the latest trading day (TTM)."""

    ticker: Str | None = None
    cik: Str | None = None
    date: Str | None = None
    price: Float | None = None
    average_volume: Float | None = None
    market_cap: Float | None = None
    enterprise_value: Float | None = None
    cash: Float | None = None
    current: Float | None = None
    quick: Float | None = None
    debt_to_equity: Float | None = None
    dividend_yield: Float | None = None
    earnings_per_share: Float | None = None
    free_cash_flow: Float | None = None
    ev_to_ebitda: Float | None = None
    ev_to_sales: Float | None = None
    price_to_book: Float | None = None
    price_to_cash_flow: Float | None = None
    price_to_earnings: Float | None = None
    price_to_free_cash_flow: Float | None = None
    price_to_sales: Float | None = None
    return_on_assets: Float | None = None
    return_on_equity: Float | None = None


def decode_balance_sheets(doc: Any) -> list[BalanceSheet]:
    """Decode a page of balance sheets."""
    return decode_results_list(doc, BalanceSheet)


def decode_cash_flow_statements(doc: Any) -> list[CashFlowStatement]:
    """Decode a page of cash-flow statements."""
    return decode_results_list(doc, CashFlowStatement)


def decode_income_statements(doc: Any) -> list[IncomeStatement]:
    """Decode a page of income statements."""
    return decode_results_list(doc, IncomeStatement)


def decode_ratios(doc: Any) -> list[FinancialRatio]:
    """Decode a page of financial ratios."""
    return decode_results_list(doc, FinancialRatio)
