# Copyright (c)
# SPDX-License-Identifier: MIT
"""Shared catalog vocabulary: aggregate timespans."""

from __future__ import annotations

from enum import Enum
from typing import Final

from polygon_rest.domain.exceptions import InvalidParameterError


class Timespan(str, Enum):
    """Size of the time window an aggregate bar covers."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str | Timespan) -> Timespan:
        """Resolve a canonical name or common abbreviation (``min``, ``d``, ``qtr`` ...).

        Raises:
            InvalidParameterError: If ``value`` is not a known timespan.
        """
        if isinstance(value, Timespan):
            return value
        key = str(value).strip().lower()
        try:
            return _TIMESPAN_ALIASES[key]
        except KeyError:
            raise InvalidParameterError(
                f"unknown timespan {value!r}",
                details={"timespan": value, "allowed": [t.value for t in cls]},
            ) from None


_TIMESPAN_ALIASES: Final[dict[str, Timespan]] = {
    "minute": Timespan.MINUTE,
    "min": Timespan.MINUTE,
    "hour": Timespan.HOUR,
    "hr": Timespan.HOUR,
    "h": Timespan.HOUR,
    "day": Timespan.DAY,
    "d": Timespan.DAY,
    "dy": Timespan.DAY,
    "week": Timespan.WEEK,
    "w": Timespan.WEEK,
    "wk": Timespan.WEEK,
    "month": Timespan.MONTH,
    "mo": Timespan.MONTH,
    "mth": Timespan.MONTH,
    "quarter": Timespan.QUARTER,
    "q": Timespan.QUARTER,
    "qtr": Timespan.QUARTER,
    "qrtr": Timespan.QUARTER,
    "year": Timespan.YEAR,
    "y": Timespan.YEAR,
    "yr": Timespan.YEAR,
}
