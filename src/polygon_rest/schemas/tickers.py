# Copyright (c)
# SPDX-License-Identifier: MIT
"""Reference-data records: tickers, related companies, ticker events and news."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base import (
    Bool,
    Float,
    Int,
    Record,
    Str,
    decode_results_list,
    decode_results_object,
)


class CompanyAddress(Record):
    address1: Str | None = None
    address2: Str | None = None
    city: Str | None = None
    state: Str | None = None
    country: Str | None = None
    postal_code: Str | None = None


class Branding(Record):
    icon_url: Str | None = None
    logo_url: Str | None = None
    accent_color: Str | None = None
    light_color: Str | None = None
    dark_color: Str | None = None


class Ticker(Record):
    """Reference record for one ticker.

    The list endpoint returns the core identification fields; the details
    endpoint adds company profile fields (address, branding, share counts).
    """

    ticker: Str | None = None
    name: Str | None = None
    active: Bool | None = None
    market: Str | None = None
    locale: Str | None = None
    primary_exchange: Str | None = None
    ticker_type: Str | None = Field(default=None, alias="type")
    cik: Str | None = None
    composite_figi: Str | None = None
    share_class_figi: Str | None = None
    currency_name: Str | None = None
    currency_symbol: Str | None = None
    base_currency_symbol: Str | None = None
    base_currency_name: Str | None = None
    delisted_utc: Str | None = None
    last_updated_utc: Str | None = None
    source_feed: Str | None = None

    # details-only
    description: Str | None = None
    homepage_url: Str | None = None
    list_date: Str | None = None
    market_cap: Float | None = None
    phone_number: Str | None = None
    sic_code: Str | None = None
    sic_description: Str | None = None
    total_employees: Int | None = None
    round_lot: Int | None = None
    share_class_shares_outstanding: Float | None = None
    weighted_shares_outstanding: Float | None = None
    address: CompanyAddress | None = None
    branding: Branding | None = None


class RelatedCompany(Record):
    ticker: Str


class TickerType(Record):
    """One entry of the supported ticker-type taxonomy."""

    code: Str | None = None
    description: Str | None = None
    asset_class: Str | None = None
    locale: Str | None = None


class TickerChange(Record):
    ticker: Str


class TickerChangeEvent(Record):
    event_type: Str = Field(alias="type")
    date: Str
    ticker_change: TickerChange


class TickerChangeResults(Record):
    """Identity of an entity plus its history of ticker changes."""

    name: Str
    composite_figi: Str
    cik: Str
    events: list[TickerChangeEvent] = Field(default_factory=list)

    @field_validator("events", mode="before")
    @classmethod
    def _null_events(cls, value: Any) -> Any:
        return [] if value is None else value


class Publisher(Record):
    name: Str | None = None
    homepage_url: Str | None = None
    logo_url: Str | None = None
    favicon_url: Str | None = None


class Insight(Record):
    ticker: Str | None = None
    sentiment: Str | None = None
    sentiment_reasoning: Str | None = None


class TickerNews(Record):
    """A news article with publisher metadata and per-ticker sentiment."""

    id: Str | None = None
    title: Str | None = None
    author: Str | None = None
    description: Str | None = None
    published_utc: Str | None = None
    article_url: Str | None = None
    amp_url: Str | None = None
    image_url: Str | None = None
    publisher: Publisher | None = None
    tickers: list[Str] | None = None
    keywords: list[Str] | None = None
    insights: list[Insight] | None = None


def decode_tickers(doc: Any) -> list[Ticker]:
    """Decode a page of reference tickers."""
    return decode_results_list(doc, Ticker)


def decode_ticker_details(doc: Any) -> Ticker:
    """Decode the single ticker object under ``results``."""
    return decode_results_object(doc, Ticker)


def decode_related(doc: Any) -> list[RelatedCompany]:
    """Decode the related-companies list."""
    return decode_results_list(doc, RelatedCompany)


def decode_ticker_types(doc: Any) -> list[TickerType]:
    """Decode the ticker-type code table."""
    return decode_results_list(doc, TickerType)


def decode_ticker_events(doc: Any) -> TickerChangeResults:
    """Decode an entity and its ticker-change history."""
    return decode_results_object(doc, TickerChangeResults)


def decode_news(doc: Any) -> list[TickerNews]:
    """Decode a page of news articles."""
    return decode_results_list(doc, TickerNews)
