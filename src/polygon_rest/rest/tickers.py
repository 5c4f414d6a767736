# Copyright (c)
# SPDX-License-Identifier: MIT
"""Ticker reference-data endpoints.

Optional parameters accepted by the remote service:

* ``all``: ``ticker``, ``type``, ``market``, ``exchange``, ``cik``, ``date``,
  ``active``, ``search``, ``limit``, ``sort``, ``order``
* ``details``: ``date``
* ``types``: ``asset_class``, ``locale``
* ``events``: ``types``
* ``news``: ``ticker``, ``published_utc``, ``limit``, ``sort``, ``order``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polygon_rest.query import Query, path_segment as seg
from polygon_rest.schemas.tickers import (
    decode_news,
    decode_related,
    decode_ticker_details,
    decode_ticker_events,
    decode_ticker_types,
    decode_tickers,
)

if TYPE_CHECKING:
    from polygon_rest.client import Polygon

__all__ = ["all", "details", "events", "news", "related", "types"]


def all(client: Polygon) -> Query[str]:  # noqa: A001
    """All ticker symbols supported by the service."""
    return Query(client, "/v3/reference/tickers", decoder=decode_tickers)


def details(client: Polygon, ticker: str) -> Query[str]:
    """Company profile and identifiers for ``ticker``."""
    return Query(client, f"/v3/reference/tickers/{seg(ticker)}", decoder=decode_ticker_details)


def related(client: Polygon, ticker: str) -> Query[str]:
    """Tickers related to ``ticker`` (news and returns co-occurrence)."""
    return Query(client, f"/v1/related-companies/{seg(ticker)}", decoder=decode_related)


def types(client: Polygon) -> Query[str]:
    """Ticker type taxonomy (``CS``, ``ETF``, ``ADRC`` ...)."""
    return Query(client, "/v3/reference/tickers/types", decoder=decode_ticker_types)


def events(client: Polygon, ticker: str) -> Query[str]:
    """Timeline of ticker changes for ``ticker`` (also accepts a CUSIP or FIGI)."""
    return Query(
        client, f"/vX/reference/tickers/{seg(ticker)}/events", decoder=decode_ticker_events
    )


def news(client: Polygon) -> Query[str]:
    """Recent news articles with publisher metadata and sentiment insights."""
    return Query(client, "/v2/reference/news", decoder=decode_news)
