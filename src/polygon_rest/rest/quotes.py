# Copyright (c)
# SPDX-License-Identifier: MIT
"""Last-quote endpoints (raw JSON only; no record decoder)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from polygon_rest.query import Query, path_segment as seg

if TYPE_CHECKING:
    from polygon_rest.client import Polygon


def last_quote(client: Polygon, ticker: str) -> Query[str]:
    """Most recent NBBO quote for ``ticker``."""
    return Query(client, f"/v2/last/nbbo/{seg(ticker)}")


def last_forex_quote(client: Polygon, from_: str, to: str) -> Query[str]:
    """Most recent quote for the currency pair ``from_``/``to`` (e.g. ``USD``/``EUR``)."""
    return Query(client, f"/v1/last_quote/currencies/{seg(from_)}/{seg(to)}")
