# Copyright (c)
# SPDX-License-Identifier: MIT
"""Static catalog of modules and endpoints exposed through the tool shim.

The catalog is a module-level tuple built once at import, so every discovery
call walks the same sequence and returns the same ordering.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from polygon_rest.domain.exceptions import ToolLookupError
from polygon_rest.rest import aggs, financials, quotes, tickers
from polygon_rest.tool_use import schemas as s

if TYPE_CHECKING:
    from polygon_rest.client import Polygon
    from polygon_rest.query import Query


@dataclass(frozen=True, slots=True)
class EndpointSpec:
    """One callable endpoint.

    Attributes:
        name: Endpoint name within its module.
        description: One-line summary shown by ``list_endpoints``.
        args_model: Pydantic model validating ``call_endpoint`` arguments.
        build: Catalog function producing the query.
        positional: Wire names of the arguments passed positionally to
            ``build``, in order; all other arguments become query parameters.
    """

    name: str
    description: str
    args_model: type[BaseModel]
    build: Callable[..., Query[Any]]
    positional: tuple[str, ...] = ()

    def schema(self) -> dict[str, Any]:
        return self.args_model.model_json_schema(by_alias=True)


@dataclass(frozen=True, slots=True)
class ModuleSpec:
    name: str
    description: str
    endpoints: tuple[EndpointSpec, ...]

    def endpoint(self, name: str) -> EndpointSpec:
        wanted = name.strip().lower()
        for spec in self.endpoints:
            if spec.name == wanted:
                return spec
        raise ToolLookupError(
            f"Unknown endpoint: {self.name}::{name}",
            details={"module": self.name, "endpoint": name},
        )


MODULES: tuple[ModuleSpec, ...] = (
    ModuleSpec(
        name="Tickers",
        description="Ticker reference data: listings, company details, related companies, "
        "ticker types, ticker change events and news.",
        endpoints=(
            EndpointSpec(
                "all",
                "List ticker symbols, filterable by type, market and exchange.",
                s.AllTickersArgs,
                tickers.all,
            ),
            EndpointSpec(
                "details",
                "Company profile and identifiers for one ticker.",
                s.TickerDetailsArgs,
                tickers.details,
                ("ticker",),
            ),
            EndpointSpec(
                "related",
                "Tickers related to a given ticker.",
                s.RelatedArgs,
                tickers.related,
                ("ticker",),
            ),
            EndpointSpec(
                "types",
                "Supported ticker type codes.",
                s.TickerTypesArgs,
                tickers.types,
            ),
            EndpointSpec(
                "events",
                "History of ticker symbol changes for an entity.",
                s.TickerEventsArgs,
                tickers.events,
                ("ticker",),
            ),
            EndpointSpec(
                "news",
                "Recent news articles with sentiment insights.",
                s.NewsArgs,
                tickers.news,
            ),
        ),
    ),
    ModuleSpec(
        name="Aggs",
        description="Aggregate OHLCV bars: custom ranges, previous close, grouped daily "
        "and daily open/close.",
        endpoints=(
            EndpointSpec(
                "aggregates",
                "Bars over a date range in windows of multiplier x timespan.",
                s.AggregatesArgs,
                aggs.aggregates,
                ("ticker", "multiplier", "timespan", "from", "to"),
            ),
            EndpointSpec(
                "previous_close",
                "Previous trading day's bar for one ticker.",
                s.PreviousCloseArgs,
                aggs.previous_close,
                ("ticker",),
            ),
            EndpointSpec(
                "grouped_daily",
                "Daily bars for every US stock on one date.",
                s.GroupedDailyArgs,
                aggs.grouped_daily,
                ("date",),
            ),
            EndpointSpec(
                "daily_open_close",
                "Open, close and extended-hours prices for one ticker on one date.",
                s.DailyOpenCloseArgs,
                aggs.daily_open_close,
                ("ticker", "date"),
            ),
        ),
    ),
    ModuleSpec(
        name="Financials",
        description="Fundamental data: balance sheets, cash flow statements, income "
        "statements and financial ratios.",
        endpoints=(
            EndpointSpec(
                "balance_sheets",
                "Balance sheet positions per reporting period.",
                s.StatementArgs,
                financials.balance_sheets,
            ),
            EndpointSpec(
                "cash_flow_statements",
                "Operating, investing and financing cash flows per period.",
                s.StatementArgs,
                financials.cash_flow_statements,
            ),
            EndpointSpec(
                "income_statements",
                "Revenue, expenses and earnings per period.",
                s.StatementArgs,
                financials.income_statements,
            ),
            EndpointSpec(
                "ratios",
                "Valuation, liquidity and leverage ratios (TTM).",
                s.RatiosArgs,
                financials.ratios,
            ),
        ),
    ),
    ModuleSpec(
        name="Quotes",
        description="Most recent NBBO and currency-pair quotes.",
        endpoints=(
            EndpointSpec(
                "last_quote",
                "Most recent NBBO quote for one ticker.",
                s.LastQuoteArgs,
                quotes.last_quote,
                ("ticker",),
            ),
            EndpointSpec(
                "last_forex_quote",
                "Most recent quote for a currency pair.",
                s.LastForexQuoteArgs,
                quotes.last_forex_quote,
                ("from", "to"),
            ),
        ),
    ),
)


def find_module(name: str) -> ModuleSpec:
    """Return the module named ``name`` (case-insensitive).

    Raises:
        ToolLookupError: If no module has that name.
    """
    wanted = name.strip().lower()
    for module in MODULES:
        if module.name.lower() == wanted:
            return module
    raise ToolLookupError(f"Unknown module: {name}", details={"module": name})


def find_endpoint(module: str, endpoint: str) -> EndpointSpec:
    return find_module(module).endpoint(endpoint)


def build_query(client: Polygon, spec: EndpointSpec, arguments: BaseModel) -> Query[Any]:
    """Bind validated ``arguments`` onto a fresh query for ``spec``."""
    values = arguments.model_dump(by_alias=True, exclude_none=True)
    query = spec.build(client, *(values.pop(name) for name in spec.positional))
    return query.params(values)
