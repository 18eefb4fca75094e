"""Application settings loaded from environment variables."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PORT = 5050
DEFAULT_LOG_LEVEL = "INFO"

# Names accepted by both stdlib logging and uvicorn
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE"}
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL

    # CORS (comma-separated origins)
    cors_origins: str = "*"

    @field_validator("port", mode="before")
    @classmethod
    def fallback_on_malformed_port(cls, value):
        """Unparseable PORT values fall back to the default; range is checked at bind time."""
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed PORT {value!r}, using default {DEFAULT_PORT}")
            return DEFAULT_PORT

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Upper-case the level, resolve aliases, and fall back to INFO on unknown names."""
        level = str(value).strip().upper()
        level = LOG_LEVEL_ALIASES.get(level, level)
        if level not in LOG_LEVELS:
            logger.warning(f"Ignoring unknown LOG_LEVEL {value!r}, using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return level

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()] or ["*"]


settings = Settings()
