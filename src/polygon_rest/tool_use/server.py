# src/polygon_rest/tool_use/server.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Tool-invocation shim.

Purpose:
    Let an external agent (for example an LLM tool-calling loop) discover and
    call endpoints at run time through a uniform ``{"tool", "params"}``
    request. Discovery is progressive:

    * list_tools            -> the tool definitions below
    * list_modules          -> module names and descriptions
    * list_endpoints        -> endpoints within one module
    * get_endpoint_schema   -> JSON Schema of one endpoint's arguments
    * call_endpoint         -> execute and return the parsed JSON response

Contract:
    - ``call_tool`` raises library errors; lookups and argument validation
      happen before any network call.
    - ``ToolServer.call`` wraps the same dispatch and returns a
      ``ToolResponse`` envelope carrying either ``result`` or ``error``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from polygon_rest.domain.exceptions import (
    InvalidParameterError,
    PolygonAPIError,
    PolygonError,
    ToolLookupError,
)
from polygon_rest.infrastructure.logging.logger import get_json_logger
from polygon_rest.tool_use.catalog import MODULES, build_query, find_endpoint, find_module
from polygon_rest.tool_use.schemas import (
    CallEndpointParams,
    GetEndpointSchemaParams,
    ListEndpointsParams,
    NoParams,
    ToolError,
    ToolRequest,
    ToolResponse,
)

if TYPE_CHECKING:
    from polygon_rest.client import Polygon

log = get_json_logger(__name__)

P = TypeVar("P", bound=BaseModel)

_TOOLS: tuple[tuple[str, str, type[BaseModel]], ...] = (
    ("list_tools", "List the tools available through this interface.", NoParams),
    ("list_modules", "List API modules (Tickers, Aggs, Financials, Quotes).", NoParams),
    ("list_endpoints", "List the endpoints of one module.", ListEndpointsParams),
    (
        "get_endpoint_schema",
        "Return the JSON Schema describing one endpoint's arguments.",
        GetEndpointSchemaParams,
    ),
    (
        "call_endpoint",
        "Call an endpoint with arguments and return the JSON response.",
        CallEndpointParams,
    ),
)


def _validate(model: type[P], params: Mapping[str, Any] | None, *, what: str) -> P:
    if params is not None and not isinstance(params, Mapping):
        raise InvalidParameterError(
            f"{what} parameters must be an object", details={"tool": what}
        )
    try:
        return model.model_validate(dict(params or {}))
    except ValidationError as exc:
        first = exc.errors(include_url=False)[0]
        field = ".".join(str(p) for p in first.get("loc", ()))
        if first.get("type") == "missing":
            message = f"Missing '{field}' parameter"
        else:
            message = f"Invalid '{field}' parameter for {what}: {first.get('msg')}"
        raise InvalidParameterError(message, details={"tool": what, "field": field}) from exc


def _identity(doc: Any) -> Any:
    return doc


# --------------------------------------------------------------------------- #
# Discovery
# --------------------------------------------------------------------------- #


def list_tools() -> list[dict[str, Any]]:
    """Return tool definitions (name, description, JSON Schema of params)."""
    return [
        {
            "name": name,
            "description": description,
            "parameters": model.model_json_schema(by_alias=True),
        }
        for name, description, model in _TOOLS
    ]


def list_modules() -> dict[str, Any]:
    return {"modules": [{"name": m.name, "description": m.description} for m in MODULES]}


def list_endpoints(module: str) -> dict[str, Any]:
    spec = find_module(module)
    return {
        "module": spec.name,
        "endpoints": [{"name": e.name, "description": e.description} for e in spec.endpoints],
    }


def get_endpoint_schema(module: str, endpoint: str) -> dict[str, Any]:
    return find_endpoint(module, endpoint).schema()


async def call_endpoint(
    client: Polygon,
    module: str,
    endpoint: str,
    arguments: Mapping[str, Any] | None = None,
) -> Any:
    """Validate ``arguments``, execute the endpoint and return parsed JSON.

    Raises:
        ToolLookupError: Unknown module or endpoint.
        InvalidParameterError: Arguments fail validation.
        PolygonError: Any transport, API or decode failure from the call.
    """
    spec = find_endpoint(module, endpoint)
    args = _validate(spec.args_model, arguments, what=f"{module}::{endpoint}")
    query = build_query(client, spec, args)
    log.info(
        "tool.call_endpoint",
        extra={"extra": {"module": module, "endpoint": spec.name, "path": query.path}},
    )
    return await query.with_decoder(_identity).get()


# --------------------------------------------------------------------------- #
# Dispatch
# --------------------------------------------------------------------------- #


async def call_tool(client: Polygon, request: ToolRequest | Mapping[str, Any]) -> Any:
    """Dispatch one ``{"tool": ..., "params": ...}`` request.

    Raises:
        ToolLookupError: Unknown tool, module or endpoint.
        InvalidParameterError: Malformed request or tool parameters.
    """
    if not isinstance(request, ToolRequest):
        request = _validate(ToolRequest, request, what="request")

    tool = request.tool
    log.info("tool.call", extra={"extra": {"tool": tool}})

    if tool == "list_tools":
        _validate(NoParams, request.params, what=tool)
        return list_tools()

    if tool == "list_modules":
        _validate(NoParams, request.params, what=tool)
        return list_modules()

    if tool == "list_endpoints":
        le = _validate(ListEndpointsParams, request.params, what=tool)
        return list_endpoints(le.module)

    if tool == "get_endpoint_schema":
        gs = _validate(GetEndpointSchemaParams, request.params, what=tool)
        return get_endpoint_schema(gs.module, gs.endpoint)

    if tool == "call_endpoint":
        ce = _validate(CallEndpointParams, request.params, what=tool)
        return await call_endpoint(client, ce.module, ce.endpoint, ce.arguments)

    raise ToolLookupError(f"Unknown tool: {tool}", details={"tool": tool})


class ToolServer:
    """Envelope-returning front end over :func:`call_tool` for a fixed client."""

    def __init__(self, client: Polygon) -> None:
        self._client = client

    @property
    def client(self) -> Polygon:
        return self._client

    def list_tools(self) -> list[dict[str, Any]]:
        return list_tools()

    async def call(self, request: ToolRequest | Mapping[str, Any]) -> ToolResponse:
        """Dispatch one request.

        Library errors become ``ToolResponse.error``; anything else propagates.
        """
        try:
            result = await call_tool(self._client, request)
        except PolygonError as exc:
            log.warning(
                "tool.call.failed",
                extra={"extra": {"code": exc.code, "error": str(exc)}},
            )
            return ToolResponse(error=_to_tool_error(exc))
        return ToolResponse(result=result)


def _to_tool_error(exc: PolygonError) -> ToolError:
    if isinstance(exc, PolygonAPIError):
        return ToolError(
            code=exc.code,
            message=exc.message,
            status=exc.status,
            request_id=exc.request_id,
        )
    return ToolError(code=exc.code, message=str(exc))
