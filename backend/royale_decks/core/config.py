"""
Configuration module for the Royale Decks backend.

The Settings object centralizes environment-driven configuration with strict
typing and validation rules so that the rest of the codebase can rely on a
single source of truth.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Literal

from pydantic import (
    AliasChoices,
    Field,
    SecretStr,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    project_name: str = Field(default="Royale Decks API", alias="PROJECT_NAME")
    environment: Literal["local", "test", "staging", "production"] = Field(
        default="local",
        alias="APP_ENV",
    )
    debug: bool = Field(default=False, alias="DEBUG")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")
    host: str = Field(default="0.0.0.0", alias="HOST")  # noqa: S104
    port: int = Field(default=4000, alias="PORT")

    database_url: str = Field(alias="DATABASE_URL")
    auto_create_schema: bool = Field(
        default=False,
        alias="AUTO_CREATE_SCHEMA",
        description="Create missing tables on startup (local SQLite setups).",
    )

    secret_key: SecretStr = Field(
        alias="SECRET_KEY",
        validation_alias=AliasChoices("SECRET_KEY", "JWT_SECRET"),
    )
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(
        default="HS256",
        alias="JWT_ALGORITHM",
    )
    access_token_expire_minutes: int = Field(
        default=7 * 24 * 60,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    password_min_length: int = Field(default=6, alias="PASSWORD_MIN_LENGTH")

    raw_backend_cors_origins: str | None = Field(
        default=None,
        alias="BACKEND_CORS_ORIGINS",
        description="Comma-separated list or JSON array of allowed origins.",
    )
    max_request_bytes: int = Field(
        default=10 * 1_048_576,
        alias="MAX_REQUEST_BYTES",
        description="Upper bound for request bodies in bytes (default 10 MiB).",
    )

    deck_list_default_limit: int = Field(default=50, alias="DECK_LIST_DEFAULT_LIMIT")
    deck_list_max_limit: int = Field(default=100, alias="DECK_LIST_MAX_LIMIT")
    reset_likes_on_card_change: bool = Field(
        default=False,
        alias="RESET_LIKES_ON_CARD_CHANGE",
        description="Purge likes and zero the counter when a deck's card list is replaced.",
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def _strip_string(cls, value: str | None, info: ValidationInfo) -> str:
        if value is None:
            field = (info.field_name or "value").upper()
            raise ValueError(f"{field} must be provided.")
        trimmed = value.strip()
        if not trimmed:
            field = (info.field_name or "value").upper()
            raise ValueError(f"{field} must not be empty.")
        return trimmed

    @field_validator("secret_key", mode="after")
    @classmethod
    def _validate_secret(cls, secret: SecretStr) -> SecretStr:
        if not secret.get_secret_value().strip():
            raise ValueError("SECRET_KEY must not be empty.")
        return secret

    @field_validator(
        "access_token_expire_minutes",
        "max_request_bytes",
        "password_min_length",
        "deck_list_default_limit",
        "deck_list_max_limit",
    )
    @classmethod
    def _validate_positive(cls, value: int, info: ValidationInfo) -> int:
        if value <= 0:
            field = (info.field_name or "value").upper()
            raise ValueError(f"{field} must be a positive integer.")
        return value

    @field_validator("raw_backend_cors_origins")
    @classmethod
    def _validate_cors_origins(cls, value: str | None) -> str | None:
        parse_cors_origins(value)
        return value

    @model_validator(mode="after")
    def _validate_list_limits(self) -> "Settings":
        if self.deck_list_default_limit > self.deck_list_max_limit:
            raise ValueError("DECK_LIST_DEFAULT_LIMIT must not exceed DECK_LIST_MAX_LIMIT.")
        return self

    @property
    def cors_origins(self) -> list[str]:
        return parse_cors_origins(self.raw_backend_cors_origins)


def parse_cors_origins(value: str | None) -> list[str]:
    """Accept ``a,b`` or ``["a", "b"]``; trailing slashes are dropped."""
    raw = (value or "").strip()
    items: list[object]
    if raw.startswith("["):
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError("BACKEND_CORS_ORIGINS is not a valid JSON array.") from exc
        items = decoded if isinstance(decoded, list) else [decoded]
    else:
        items = list(raw.split(","))
    origins = (str(item).strip().rstrip("/") for item in items)
    return [origin for origin in origins if origin]


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance so configuration is evaluated once."""
    # BaseSettings loads required values from env/.env during instantiation.
    return Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "get_settings", "parse_cors_origins"]
