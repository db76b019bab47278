"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import HttpTimeoutS, HttpUrlStr, NonEmptyStr, PageSize, SearchLimit

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


class HttpSettings(BaseModel):
    """Outbound HTTP configuration shared by every page scraper."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    timeout_s: HttpTimeoutS = Field(
        default=15.0,
        validation_alias=AliasChoices("timeout_s", "timeout"),
    )
    user_agent: NonEmptyStr = DEFAULT_USER_AGENT
    accept_language: NonEmptyStr = "en-US,en;q=0.9"


class SearchSettings(BaseModel):
    """Text search configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    default_limit: SearchLimit = Field(
        default=5,
        validation_alias=AliasChoices("default_limit", "limit"),
    )


class YouTubeSettings(BaseModel):
    """YouTube playlist and URL configuration."""

    model_config = SettingsConfigDict(frozen=True)

    base_url: HttpUrlStr = "https://www.youtube.com"
    page_size: PageSize = 100
    mix_author: NonEmptyStr = "YouTube Mix"

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - HTTP__TIMEOUT_S, HTTP__USER_AGENT (nested with delimiter)
    - SEARCH__DEFAULT_LIMIT
    - YOUTUBE__PAGE_SIZE, YOUTUBE__MIX_AUTHOR
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    http: HttpSettings = Field(default_factory=HttpSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    youtube: YouTubeSettings = Field(default_factory=YouTubeSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels))
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
