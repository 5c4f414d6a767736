# src/polygon_rest/processors.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Response processors.

A processor turns the response body returned by the transport into the value
handed back from ``Query.get()``:

* :class:`RawProcessor` returns the body text untouched.
* :class:`DecoderProcessor` parses JSON and applies a decoder function,
  typically one of the record decoders in :mod:`polygon_rest.schemas`.
* :class:`TableProcessor` produces a ``pandas.DataFrame``.

Every parse or shape failure surfaces as :class:`PolygonDecodeError`.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Generic, Protocol, TypeVar

import pandas as pd
from pydantic import ValidationError

from polygon_rest.domain.exceptions import PolygonDecodeError
from polygon_rest.schemas.base import Record

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Decoder = Callable[[Any], T]


class Processor(Protocol[T_co]):
    """Converts a response body into the caller-facing result."""

    def process(self, body: str) -> T_co: ...


def parse_json(body: str) -> Any:
    """Parse ``body`` as JSON, mapping syntax errors to ``PolygonDecodeError``."""
    try:
        return json.loads(body)
    except ValueError as exc:
        raise PolygonDecodeError(f"invalid JSON: {exc}", details={"reason": "non_json"}) from exc


class RawProcessor:
    """Return the body text unchanged."""

    def process(self, body: str) -> str:
        return body


class DecoderProcessor(Generic[T]):
    """Parse JSON and apply ``decoder`` to the resulting value."""

    def __init__(self, decoder: Decoder[T]) -> None:
        self._decoder = decoder

    @property
    def decoder(self) -> Decoder[T]:
        return self._decoder

    def process(self, body: str) -> T:
        doc = parse_json(body)
        try:
            return self._decoder(doc)
        except PolygonDecodeError:
            raise
        except (ValidationError, ValueError, TypeError, LookupError, AttributeError) as exc:
            # Custom decoders may fail with plain Python errors on a shape mismatch.
            raise PolygonDecodeError(str(exc), details={"decoder": _name_of(self._decoder)}) from exc


class TableProcessor:
    """Build a ``DataFrame`` from the response.

    With a decoder, rows come from the decoded records (descriptive column
    names, validated types). Without one, rows come from the raw ``results``
    member of the document.
    """

    def __init__(self, decoder: Decoder[Any] | None = None) -> None:
        self._decoder = decoder

    def process(self, body: str) -> pd.DataFrame:
        if self._decoder is not None:
            return to_table(DecoderProcessor(self._decoder).process(body))

        doc = parse_json(body)
        if not isinstance(doc, Mapping) or "results" not in doc:
            raise PolygonDecodeError("Missing 'results' field", details={"field": "results"})
        return to_table(doc["results"])


def to_table(data: Any) -> pd.DataFrame:
    """Convert records, a single record, or JSON rows into a ``DataFrame``.

    Nested objects are flattened into dotted column names
    (``address.city``, ``publisher.name``). An empty sequence yields an empty
    frame.

    Raises:
        PolygonDecodeError: If any row is not an object.
    """
    if isinstance(data, (Record, Mapping)):
        items: Sequence[Any] = [data]
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
        items = data
    else:
        raise PolygonDecodeError(
            f"cannot tabulate {type(data).__name__}", details={"expected": "rows"}
        )

    rows: list[dict[str, Any]] = []
    for item in items:
        if isinstance(item, Record):
            rows.append(item.model_dump())
        elif isinstance(item, Mapping):
            rows.append(dict(item))
        else:
            raise PolygonDecodeError(
                f"table rows must be objects, got {type(item).__name__}",
                details={"expected": "object"},
            )

    if not rows:
        return pd.DataFrame()
    return pd.json_normalize(rows)


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
