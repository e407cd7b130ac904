"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables, with an optional .env file
as a fallback. Nothing here is secret: the facility API keeps its records in
process memory and has no database or signing keys to configure.

Pydantic Settings automatically:
  1. Reads from environment variables (highest priority)
  2. Falls back to .env file values
  3. Uses defaults defined here (lowest priority)

Usage:
    from facility_api.config import settings
    print(settings.DEFAULT_CARD_VALIDITY_YEARS)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the Facility Access API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # --- Application ---
    APP_NAME: str = "Facility Access API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # --- Logging ---
    # Level name understood by the logging module ("DEBUG", "INFO", ...)
    LOG_LEVEL: str = "INFO"

    # --- Keycards ---
    # Validity window applied when a card is issued without an expiration date
    DEFAULT_CARD_VALIDITY_YEARS: int = 1

    # --- CORS ---
    # Origins allowed to make cross-origin requests (front desk UI URLs)
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]


# Singleton: import this instance everywhere instead of creating new Settings()
settings = Settings()
