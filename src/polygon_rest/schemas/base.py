# src/polygon_rest/schemas/base.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Record base model and envelope helpers.

Records are frozen pydantic models. Models themselves are lax so nested JSON
objects validate into nested records, but every scalar field uses a strict
type so that ``"150"`` is never silently accepted where a number is expected.

Envelope helpers apply the response-shape rule shared by the decoders:

* list endpoints require ``results`` to be a list,
* single-object endpoints require ``results`` to be an object,
* a few endpoints (daily open/close) decode the whole document.

All failures raise :class:`PolygonDecodeError`; a partially built record is
never returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Strict, TypeAdapter, ValidationError

from polygon_rest.domain.exceptions import PolygonDecodeError

Float = Annotated[float, Strict()]
Int = Annotated[int, Strict()]
Str = Annotated[str, Strict()]
Bool = Annotated[bool, Strict()]

R = TypeVar("R", bound="Record")


class Record(BaseModel):
    """Base class for every decoded response record."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors(include_url=False)[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{loc}: {first.get('msg', 'invalid value')}"


def _require_object(doc: Any) -> Mapping[str, Any]:
    if not isinstance(doc, Mapping):
        raise PolygonDecodeError(
            f"expected a JSON object, got {type(doc).__name__}",
            details={"expected": "object"},
        )
    return doc


def _results(doc: Any) -> Any:
    body = _require_object(doc)
    if "results" not in body:
        raise PolygonDecodeError("missing field `results`", details={"field": "results"})
    return body["results"]


def decode_results_list(doc: Any, model: type[R]) -> list[R]:
    """Decode ``doc["results"]`` as a list of ``model`` records."""
    results = _results(doc)
    if not isinstance(results, list):
        raise PolygonDecodeError(
            "`results` must be a list", details={"field": "results", "expected": "list"}
        )
    try:
        return TypeAdapter(list[model]).validate_python(results)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise PolygonDecodeError(
            _format_validation_error(exc), details={"model": model.__name__}
        ) from exc


def decode_results_object(doc: Any, model: type[R]) -> R:
    """Decode ``doc["results"]`` as a single ``model`` record."""
    results = _results(doc)
    if not isinstance(results, Mapping):
        raise PolygonDecodeError(
            "`results` must be an object", details={"field": "results", "expected": "object"}
        )
    return decode_document(results, model)


def decode_document(doc: Any, model: type[R]) -> R:
    """Decode the whole JSON document as one ``model`` record."""
    body = _require_object(doc)
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise PolygonDecodeError(
            _format_validation_error(exc), details={"model": model.__name__}
        ) from exc
