"""
Environment configuration for the oven supervisor.

Loads configuration from environment variables (prefix OVEN_) and an
optional .env file using pydantic-settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OVEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="HTTP bind address")
    port: int = Field(default=8080, ge=1024, le=65535, description="HTTP API port")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text", description="Logging format - text for human-readable, json for structured logs"
    )

    # Cooking Configuration
    cook_increment_seconds: int = Field(
        default=60, ge=1, le=3600, description="Seconds added by each start press"
    )
    tick_interval_seconds: float = Field(
        default=1.0, gt=0.0, le=60.0, description="Countdown cadence in seconds"
    )


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
