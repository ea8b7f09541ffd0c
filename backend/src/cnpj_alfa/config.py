"""
Application configuration loaded from environment variables.

All configuration is validated at startup to fail fast on misconfiguration.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation.

    Loaded from environment variables prefixed with CNPJ_ALFA_
    (e.g. CNPJ_ALFA_LOG_LEVEL). Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_prefix="CNPJ_ALFA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the CLI and HTTP service"
    )

    # Server
    debug: bool = Field(
        default=False,
        description="Enable debug mode with API docs and detailed error messages"
    )
    allowed_origins: list[str] = Field(
        default=["*"],
        description="CORS origins allowed to call the HTTP service"
    )

    # Batch validation
    batch_limit: int = Field(
        default=1000,
        ge=1,
        le=10000,
        description="Maximum number of identifiers per batch request"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and cached for subsequent calls.
    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
