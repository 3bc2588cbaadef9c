"""Configuration for rails-http.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  them into the builder or the CLI.
- Adapters (token sources, HTTP client) read config consistently.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, `.env`).
    - A single configuration contract for library, adapters and CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILS_HTTP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    csrf_token: str | None = Field(
        default=None,
        description="CSRF token to attach to state-changing requests.",
    )
    csrf_page_path: Path | None = Field(
        default=None,
        description="Saved HTML page whose csrf meta tag provides the token.",
    )
    csrf_meta_name: str = Field(
        default="csrf-token",
        min_length=1,
        description="`name` attribute of the meta tag holding the token.",
    )

    base_url: str = Field(
        default="",
        description="Base URL for relative request URLs (empty: none).",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow 3xx responses in built clients.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Level for `configure_logging` (DEBUG, INFO, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
