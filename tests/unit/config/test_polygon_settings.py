# tests/unit/config/test_polygon_settings.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from polygon_rest.config.settings import DEFAULT_BASE_URL, PolygonSettings, get_settings


def test_defaults_without_env() -> None:
    s = PolygonSettings()
    assert s.api_key is None
    assert s.base_url == DEFAULT_BASE_URL
    assert s.timeout_s == 10.0


def test_reads_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLYGON_API_KEY", "abc")
    monkeypatch.setenv("POLYGON_BASE_URL", "https://example.test/")
    monkeypatch.setenv("POLYGON_TIMEOUT_S", "3")

    s = PolygonSettings()
    assert s.api_key is not None
    assert s.api_key.get_secret_value() == "abc"
    assert s.base_url == "https://example.test"
    assert s.timeout_s == 3.0


def test_reads_dotenv_file(tmp_path: Path) -> None:
    # conftest chdirs into tmp_path, so a .env there is picked up.
    (tmp_path / ".env").write_text("POLYGON_API_KEY=from-dotenv\n", encoding="utf-8")
    s = PolygonSettings()
    assert s.api_key is not None
    assert s.api_key.get_secret_value() == "from-dotenv"


def test_blank_key_is_treated_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLYGON_API_KEY", "   ")
    assert PolygonSettings().api_key is None


def test_key_is_not_leaked_in_repr(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLYGON_API_KEY", "super-secret")
    assert "super-secret" not in repr(PolygonSettings())


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        PolygonSettings(timeout_s=0)


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("POLYGON_API_KEY", "later")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().api_key is not None
