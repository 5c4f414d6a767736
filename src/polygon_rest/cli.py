# src/polygon_rest/cli.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Polygon REST CLI: tool discovery and raw endpoint calls.

Commands:
    tools list                          Tool definitions (JSON Schema params).
    tools modules                       Available API modules.
    tools endpoints MODULE              Endpoints of one module.
    tools schema MODULE ENDPOINT        Argument schema of one endpoint.
    tools call MODULE ENDPOINT --args   Call an endpoint, print the JSON response.

Environment:
    POLYGON_API_KEY     API key (required for ``tools call``).
    POLYGON_BASE_URL    Optional override of https://api.polygon.io.
    LOG_LEVEL           Root log level for the JSON logs on stderr.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import typer

from polygon_rest.client import Polygon
from polygon_rest.config.settings import get_settings
from polygon_rest.domain.exceptions import PolygonError
from polygon_rest.infrastructure.logging.logger import configure_root_logging, get_json_logger
from polygon_rest.tool_use.server import (
    ToolServer,
    get_endpoint_schema,
    list_endpoints,
    list_modules,
    list_tools,
)

configure_root_logging()
log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)
tools_app = typer.Typer(no_args_is_help=True)
app.add_typer(tools_app, name="tools")


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, sort_keys=False, default=str))


def _fail(exc: PolygonError) -> None:
    typer.echo(json.dumps(exc.to_dict(), default=str), err=True)
    raise typer.Exit(code=1)


@tools_app.command("list")
def tools_list() -> None:
    """Print the tool definitions."""
    _echo_json(list_tools())


@tools_app.command("modules")
def tools_modules() -> None:
    """Print the available API modules."""
    _echo_json(list_modules())


@tools_app.command("endpoints")
def tools_endpoints(module: str = typer.Argument(..., help="Module name, e.g. Aggs.")) -> None:
    """Print the endpoints of MODULE."""
    try:
        _echo_json(list_endpoints(module))
    except PolygonError as exc:
        _fail(exc)


@tools_app.command("schema")
def tools_schema(
    module: str = typer.Argument(..., help="Module name, e.g. Aggs."),
    endpoint: str = typer.Argument(..., help="Endpoint name, e.g. previous_close."),
) -> None:
    """Print the argument schema of MODULE ENDPOINT."""
    try:
        _echo_json(get_endpoint_schema(module, endpoint))
    except PolygonError as exc:
        _fail(exc)


@tools_app.command("call")
def tools_call(
    module: str = typer.Argument(..., help="Module name, e.g. Aggs."),
    endpoint: str = typer.Argument(..., help="Endpoint name, e.g. previous_close."),
    args: str = typer.Option("{}", "--args", help='Endpoint arguments as JSON, e.g. \'{"ticker": "AAPL"}\'.'),  # noqa: B008
    api_key: str | None = typer.Option(  # noqa: B008
        None, "--api-key", envvar="POLYGON_API_KEY", help="Polygon API key."
    ),
) -> None:
    """Call MODULE ENDPOINT and print the JSON response."""
    try:
        arguments = json.loads(args)
    except ValueError as exc:
        raise typer.BadParameter(f"--args is not valid JSON: {exc}") from exc
    if not isinstance(arguments, dict):
        raise typer.BadParameter("--args must be a JSON object")

    settings = get_settings()
    # --api-key, then POLYGON_API_KEY from the environment or .env
    if api_key is None and settings.api_key is not None:
        api_key = settings.api_key.get_secret_value()

    async def _run() -> Any:
        async with Polygon(api_key, settings=settings) as client:
            server = ToolServer(client)
            return await server.call(
                {
                    "tool": "call_endpoint",
                    "params": {"module": module, "endpoint": endpoint, "arguments": arguments},
                }
            )

    response = asyncio.run(_run())
    if response.error is not None:
        log.error(
            "cli.tools_call.failed",
            extra={"extra": {"module": module, "endpoint": endpoint, "code": response.error.code}},
        )
        typer.echo(response.error.model_dump_json(), err=True)
        raise typer.Exit(code=1)
    _echo_json(response.result)


if __name__ == "__main__":  # pragma: no cover
    app()
