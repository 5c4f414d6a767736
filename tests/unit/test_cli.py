# tests/unit/test_cli.py
from __future__ import annotations

import json

import pytest
import respx
from httpx import Response
from typer.testing import CliRunner

from polygon_rest.cli import app

runner = CliRunner()


def test_tools_list_prints_json() -> None:
    result = runner.invoke(app, ["tools", "list"])
    assert result.exit_code == 0
    names = [t["name"] for t in json.loads(result.stdout)]
    assert names[0] == "list_tools"


def test_tools_endpoints() -> None:
    result = runner.invoke(app, ["tools", "endpoints", "Financials"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["endpoints"][-1]["name"] == "ratios"


def test_tools_schema_unknown_endpoint_exits_nonzero() -> None:
    result = runner.invoke(app, ["tools", "schema", "Aggs", "nope"])
    assert result.exit_code == 1
    assert "TOOL_LOOKUP_ERROR" in result.output


@respx.mock
def test_tools_call_hits_configured_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLYGON_API_KEY", "cli-key")
    monkeypatch.setenv("POLYGON_BASE_URL", "https://api.polygon.test")
    route = respx.get("https://api.polygon.test/v2/aggs/ticker/AAPL/prev").mock(
        return_value=Response(200, json={"status": "OK", "results": [{"c": 150.0}]})
    )

    result = runner.invoke(
        app, ["tools", "call", "Aggs", "previous_close", "--args", '{"ticker": "AAPL"}']
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["results"][0]["c"] == 150.0
    assert route.calls.last.request.url.params["apiKey"] == "cli-key"


def test_tools_call_without_key_reports_error() -> None:
    result = runner.invoke(app, ["tools", "call", "Tickers", "types"])
    assert result.exit_code == 1
    assert "MISSING_API_KEY" in result.output


def test_tools_call_rejects_non_object_args() -> None:
    result = runner.invoke(app, ["tools", "call", "Tickers", "types", "--args", "[1]"])
    assert result.exit_code != 0


@respx.mock
def test_tools_call_reads_key_from_dotenv(tmp_path) -> None:
    (tmp_path / ".env").write_text(
        "POLYGON_API_KEY=from-dotenv\nPOLYGON_BASE_URL=https://api.polygon.test\n"
    )
    route = respx.get("https://api.polygon.test/v3/reference/tickers/types").mock(
        return_value=Response(200, json={"status": "OK", "results": []})
    )

    result = runner.invoke(app, ["tools", "call", "Tickers", "types"])

    assert result.exit_code == 0, result.output
    assert route.calls.last.request.url.params["apiKey"] == "from-dotenv"


@respx.mock
def test_tools_call_flag_overrides_dotenv(tmp_path) -> None:
    (tmp_path / ".env").write_text(
        "POLYGON_API_KEY=from-dotenv\nPOLYGON_BASE_URL=https://api.polygon.test\n"
    )
    route = respx.get("https://api.polygon.test/v3/reference/tickers/types").mock(
        return_value=Response(200, json={"status": "OK", "results": []})
    )

    result = runner.invoke(app, ["tools", "call", "Tickers", "types", "--api-key", "flag-key"])

    assert result.exit_code == 0, result.output
    assert route.calls.last.request.url.params["apiKey"] == "flag-key"
