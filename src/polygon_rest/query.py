# src/polygon_rest/query.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Query builder.

A :class:`Query` is created by a catalog function with its path parameters
already substituted. Callers add optional query-string parameters, choose how
the response is processed, and finally ``await query.get()``.

Parameter rules:
    * values are ``str``, ``int``, ``float`` or ``bool``; booleans render as
      ``true`` / ``false``,
    * setting the same name twice keeps the last value,
    * parameter names and values are not checked against what the remote
      endpoint accepts; the remote service is the authority on that.

The rendered URL is ``{base_url}{path}?{params...}&apiKey={key}`` with
parameters in first-insertion order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar
from urllib.parse import quote, urlencode

import pandas as pd

from polygon_rest.domain.exceptions import InvalidParameterError, PolygonError
from polygon_rest.infrastructure.logging.logger import get_json_logger
from polygon_rest.processors import (
    Decoder,
    DecoderProcessor,
    Processor,
    RawProcessor,
    TableProcessor,
)

if TYPE_CHECKING:
    from polygon_rest.client import Polygon

log = get_json_logger(__name__)

ParamValue = str | int | float | bool

T = TypeVar("T")
U = TypeVar("U")

_API_KEY_PARAM = "apiKey"


def path_segment(value: str | int | float) -> str:
    """Percent-encode one path segment (``/`` included)."""
    return quote(str(value), safe=":")


def encode_value(value: ParamValue) -> str:
    """Render a parameter value as it appears in the query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _check_param(name: Any, value: Any) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidParameterError(
            f"parameter name must be a non-empty string, got {name!r}",
            details={"name": repr(name)},
        )
    if name == _API_KEY_PARAM:
        raise InvalidParameterError(
            f"{_API_KEY_PARAM!r} is reserved; set the key on the client",
            details={"name": name},
        )
    if not isinstance(value, (str, int, float, bool)):
        raise InvalidParameterError(
            f"parameter {name!r} has unsupported type {type(value).__name__}",
            details={"name": name, "type": type(value).__name__},
        )


class Query(Generic[T]):
    """A single pending request against one endpoint."""

    def __init__(
        self,
        client: Polygon,
        path: str,
        *,
        decoder: Decoder[Any] | None = None,
        processor: Processor[T] | None = None,
    ) -> None:
        """Create a query.

        Args:
            client: Client context providing key, base URL and transport.
            path: Endpoint path with path parameters already substituted.
            decoder: Default record decoder for this endpoint, if it has one.
            processor: Response processor; raw text when omitted.
        """
        self._client = client
        self._path = path
        self._decoder = decoder
        self._processor: Processor[Any] = processor or RawProcessor()
        self._params: dict[str, ParamValue] = {}

    @property
    def client(self) -> Polygon:
        return self._client

    @property
    def path(self) -> str:
        return self._path

    @property
    def query_params(self) -> dict[str, ParamValue]:
        """Snapshot of the optional parameters set so far."""
        return dict(self._params)

    @property
    def default_decoder(self) -> Decoder[Any] | None:
        return self._decoder

    # ----------------------------- Parameters ------------------------------ #

    def param(self, name: str, value: ParamValue) -> Self:
        """Set one query parameter (last write wins) and return ``self``."""
        _check_param(name, value)
        self._params[name] = value
        return self

    def params(
        self, items: Mapping[str, ParamValue] | Iterable[tuple[str, ParamValue]]
    ) -> Self:
        """Set several parameters in order; equivalent to repeated :meth:`param`."""
        pairs = items.items() if isinstance(items, Mapping) else items
        for name, value in pairs:
            self.param(name, value)
        return self

    # ----------------------------- Processing ------------------------------ #

    def raw(self) -> Query[str]:
        """Return the body text unchanged (the default)."""
        return self._with_processor(RawProcessor())

    def decoded(self) -> Query[Any]:
        """Decode into this endpoint's typed records.

        Raises:
            PolygonError: If the endpoint has no default decoder.
        """
        if self._decoder is None:
            raise PolygonError(
                f"no default decoder for {self._path}; use with_decoder()",
                details={"path": self._path},
            )
        return self._with_processor(DecoderProcessor(self._decoder))

    def with_decoder(self, decoder: Decoder[U]) -> Query[U]:
        """Decode with ``decoder``, a function applied to the parsed JSON value."""
        return self._with_processor(DecoderProcessor(decoder))

    def as_dataframe(self) -> Query[pd.DataFrame]:
        """Return a ``pandas.DataFrame`` instead of text or records."""
        return self._with_processor(TableProcessor(self._decoder))

    def _with_processor(self, processor: Processor[U]) -> Query[U]:
        clone: Query[U] = Query(
            self._client, self._path, decoder=self._decoder, processor=processor
        )
        clone._params = dict(self._params)
        return clone

    # ----------------------------- Execution ------------------------------- #

    def url(self, *, include_key: bool = True) -> str:
        """Render the request URL.

        Raises:
            MissingApiKeyError: If ``include_key`` and the client has no key.
        """
        pairs = [(name, encode_value(value)) for name, value in self._params.items()]
        if include_key:
            pairs.append((_API_KEY_PARAM, self._client.require_key()))
        base = f"{self._client.base_url}{self._path}"
        if not pairs:
            return base
        return f"{base}?{urlencode(pairs)}"

    async def get(self) -> T:
        """Execute the request and process the response.

        Raises:
            MissingApiKeyError: No key configured; raised before any I/O.
            PolygonTransportError: Network failure or non-success status.
            PolygonDecodeError: Body does not match the expected shape.
        """
        url = self.url()
        log.debug(
            "polygon.query.get",
            extra={"extra": {"path": self._path, "params": sorted(self._params)}},
        )
        body = await self._client.transport.get(url)
        result: T = self._processor.process(body)
        return result

    execute = get

    def __repr__(self) -> str:
        return f"Query(path={self._path!r}, params={self._params!r})"
