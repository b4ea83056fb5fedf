# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.backend_base_url)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing is required: every value has a development default.
    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Content Backend
    # -------------------------------------------------------------------------
    # Serves GET /api/scrape (page copy) and POST /api/contact (form)

    BACKEND_URL: str = Field(
        default="http://localhost:8000",
        validation_alias=AliasChoices("BACKEND_URL", "VITE_BACKEND_URL"),
        description="Base URL of the content backend"
    )

    # Unset means no timeout at all
    BACKEND_TIMEOUT_SECONDS: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for backend requests in seconds"
    )

    CONTENT_REQUIRE_SUCCESS: bool = Field(
        default=False,
        description="Treat a non-2xx /api/scrape response as a failed fetch"
    )

    # -------------------------------------------------------------------------
    # Site
    # -------------------------------------------------------------------------

    SITE_NAME: str = Field(
        default="Qarakal",
        min_length=1,
        description="Brand name shown in the nav bar and footer"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the site server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty values fall back to defaults (BACKEND_URL= means "unset")
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def backend_base_url(self) -> str:
        """
        Backend URL without a trailing slash.

        Example: "http://localhost:8000/" -> "http://localhost:8000"
        """
        return self.BACKEND_URL.rstrip("/")

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://qarakal.com" -> ["http://localhost:3000", "https://qarakal.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
