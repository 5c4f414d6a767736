# Copyright (c)
# SPDX-License-Identifier: MIT
"""Aggregate (bar) endpoints.

Optional parameters accepted by the remote service:

* ``aggregates``: ``adjusted``, ``sort``, ``limit``
* ``previous_close``: ``adjusted``
* ``grouped_daily``: ``adjusted``, ``include_otc``
* ``daily_open_close``: ``adjusted``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from polygon_rest.query import Query, path_segment as seg
from polygon_rest.rest.common import Timespan
from polygon_rest.schemas.aggs import (
    decode_aggregates,
    decode_daily_open_close,
    decode_grouped_daily,
    decode_previous_close,
)

if TYPE_CHECKING:
    from polygon_rest.client import Polygon


def aggregates(
    client: Polygon,
    ticker: str,
    multiplier: int,
    timespan: str | Timespan,
    from_: str,
    to: str,
) -> Query[str]:
    """Bars for ``ticker`` over ``[from_, to]`` in windows of ``multiplier`` x ``timespan``.

    ``from_`` and ``to`` are ``YYYY-MM-DD`` dates or millisecond timestamps.
    """
    span = Timespan.parse(timespan).value
    path = (
        f"/v2/aggs/ticker/{seg(ticker)}/range/{seg(multiplier)}/{span}"
        f"/{seg(from_)}/{seg(to)}"
    )
    return Query(client, path, decoder=decode_aggregates)


def previous_close(client: Polygon, ticker: str) -> Query[str]:
    """Previous trading day's open, high, low and close for ``ticker``."""
    return Query(client, f"/v2/aggs/ticker/{seg(ticker)}/prev", decoder=decode_previous_close)


def grouped_daily(client: Polygon, date: str) -> Query[str]:
    """Daily bars for every US stock on ``date``."""
    return Query(
        client,
        f"/v2/aggs/grouped/locale/us/market/stocks/{seg(date)}",
        decoder=decode_grouped_daily,
    )


def daily_open_close(client: Polygon, ticker: str, date: str) -> Query[str]:
    """Open, close and pre/after-market prices for ``ticker`` on ``date``."""
    return Query(
        client,
        f"/v1/open-close/{seg(ticker)}/{seg(date)}",
        decoder=decode_daily_open_close,
    )
