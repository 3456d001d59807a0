"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Environment variables understood by the service. All have defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Server ────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8080

    # ── App ───────────────────────────────────────────────────
    app_name: str = "userstore"
    log_level: LogLevel = "INFO"
    debug: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        # LOG_LEVEL=debug is as good as LOG_LEVEL=DEBUG
        return value.upper() if isinstance(value, str) else value


# Singleton — import this wherever config is needed
settings = Settings()
