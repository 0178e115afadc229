"""Application configuration using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SoundrexSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="SOUNDREX_",
        extra="ignore",
    )

    # Per-call timeouts (seconds)
    library_timeout: float = Field(
        default=20.0,
        gt=0,
        description="Timeout for the metadata library extraction",
    )
    public_api_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the public streaming API request",
    )
    mirror_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for each federated mirror request",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins for the HTTP API",
    )


@lru_cache
def get_settings() -> SoundrexSettings:
    """Get cached settings instance."""
    return SoundrexSettings()


def configure_logging(level: str = "INFO") -> None:
    """Apply a log level to the soundrex logger hierarchy."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("soundrex").setLevel(numeric_level)
