"""Configuration settings"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Settings priority:
#
# - Arguments passed when instantiating Settings(...)
# - Environment variables from the OS
# - .env file (if configured via SettingsConfigDict(env_file=...))
# - Default values in this class


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file="../.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "Orar"
    APP_VERSION: str = Field(
        default="1.0.0",
        description="API version reported by the status endpoint",
    )

    # OS settings
    DTAP: str = Field(
        default="DEV",
        description="DTAP environment (DEV/tests/ACC/PROD)",
    )
    IMAGE_TAG: str = Field(
        default="undefined",
        description="Image tag from container build",
    )

    # Logging settings
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")

    # Security headers settings
    ENABLE_HSTS: bool = Field(
        default=False,
        description="Send Strict-Transport-Security (usually set by the reverse proxy)",
    )
    ENABLE_CSP: bool = Field(
        default=True, description="Send Content-Security-Policy"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
