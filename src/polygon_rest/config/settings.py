# src/polygon_rest/config/settings.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Polygon client configuration (Pydantic Settings, v2).

Summary:
    Typed configuration for the Polygon REST client. Values come from the
    process environment (prefix ``POLYGON_``) or a local ``.env`` file.

Environment variables:
    * ``POLYGON_API_KEY``     API key sent as the ``apiKey`` query parameter.
    * ``POLYGON_BASE_URL``    Service root, defaults to ``https://api.polygon.io``.
    * ``POLYGON_TIMEOUT_S``   Per-request timeout in seconds.
    * ``POLYGON_USER_AGENT``  ``User-Agent`` header sent by the default transport.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.polygon.io"


class PolygonSettings(BaseSettings):
    """Configuration for the Polygon REST client.

    The API key is optional at construction time; operations that need it
    raise :class:`~polygon_rest.domain.exceptions.MissingApiKeyError` when it
    is absent.
    """

    api_key: SecretStr | None = Field(
        default=None,
        description="Polygon API key.",
    )
    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Base URL of the Polygon REST API.",
    )
    timeout_s: float = Field(
        10.0,
        gt=0,
        description="Per-request timeout in seconds for the default transport.",
    )
    user_agent: str = Field(
        "polygon-rest-query/0.1",
        description="User-Agent header sent by the default transport.",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="POLYGON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def _empty_key_is_missing(cls, value: SecretStr | None) -> SecretStr | None:
        # An exported-but-empty POLYGON_API_KEY counts as unset.
        if value is not None and not value.get_secret_value().strip():
            return None
        return value


@lru_cache(maxsize=1)
def get_settings() -> PolygonSettings:
    """Return the process-wide settings (cached).

    Tests that mutate the environment should call ``get_settings.cache_clear()``.
    """
    return PolygonSettings()
