"""Environment-driven settings layered over the static defaults in ``constants``."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from quiz_challenge.constants.network_constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)


class Settings(BaseSettings):
    """Runtime configuration read from ``QUIZ_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="QUIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    api_url: str = DEFAULT_API_BASE_URL
    catalog_dir: Path | None = None
    log_level: str = "INFO"
    request_timeout_seconds: float = Field(default=DEFAULT_REQUEST_TIMEOUT_SECONDS, gt=0)
    embed_server: bool = False


def get_settings() -> Settings:
    return Settings()
