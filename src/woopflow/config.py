"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `WOOPFLOW_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from woopflow.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PORT = 3001
DEFAULT_RAGFLOW_TIMEOUT_MS = 30000


def _int_or_default(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def parse_allowed_origins(value: str | None) -> list[str]:
    """Split a comma-separated origin list, dropping blanks."""

    if not value:
        return []
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings(BaseSettings):
    """woopflow settings.

    Field names map to the unprefixed environment variables the service is deployed with
    (`PORT`, `RAGFLOW_BASE_URL`, ...).
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=DEFAULT_PORT)
    log_level: str = Field(default="INFO")
    cors_allowed_origins: str = Field(default="")

    # RAGFlow backend
    ragflow_base_url: str = Field(default="")
    ragflow_api_key: str = Field(default="")
    ragflow_query_path: str = Field(default="")
    ragflow_datasets_path: str = Field(default="")
    # milliseconds
    ragflow_timeout: int = Field(default=DEFAULT_RAGFLOW_TIMEOUT_MS)

    @field_validator("port", mode="before")
    @classmethod
    def _parse_port(cls, value: Any) -> int:
        return _int_or_default(value, DEFAULT_PORT)

    @field_validator("ragflow_timeout", mode="before")
    @classmethod
    def _parse_timeout(cls, value: Any) -> int:
        return _int_or_default(value, DEFAULT_RAGFLOW_TIMEOUT_MS)

    @property
    def allowed_origins(self) -> list[str]:
        return parse_allowed_origins(self.cors_allowed_origins)

    @property
    def ragflow_timeout_s(self) -> float:
        return self.ragflow_timeout / 1000.0


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("WOOPFLOW_ENV_FILE")
    if env_file_override:
        settings = Settings(_env_file=Path(env_file_override))
    else:
        default_env = Path.cwd() / ".env"
        if default_env.exists():
            settings = Settings(_env_file=default_env)
        else:
            settings = Settings()

    if not settings.ragflow_base_url:
        logger.warning("RAGFLOW_BASE_URL is not configured. RAGFlow requests will fail until it is set.")
    if not settings.ragflow_query_path:
        logger.warning("RAGFLOW_QUERY_PATH is not configured. Update your environment to enable RAGFlow queries.")

    return settings
