"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
Supports SQLite (default) and PostgreSQL databases.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "Hotel Listing API"
    DEBUG: bool = False

    # Logging Config
    # Overrides the level derived from DEBUG, e.g. "WARNING"
    LOG_LEVEL: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = None
    # Also write logs to this file, rotated by size
    LOG_FILE: Optional[str] = None
    LOG_FILE_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_FILE_BACKUP_COUNT: int = 5

    # Database Config
    # Supports "sqlite" or "postgresql"
    DATABASE_TYPE: Literal["sqlite", "postgresql"] = "sqlite"
    # SQLite default database path, PostgreSQL requires full connection string
    DATABASE_URL: str = "sqlite+aiosqlite:///./hotel_listing.db"
    # Insert the sample countries and hotels on startup when the tables are empty
    SEED_SAMPLE_DATA: bool = True

    # JWT Config
    # Symmetric HMAC-SHA256 signing key, at least 32 bytes
    JWT_KEY: str = "hotel-listing-development-signing-key-change-me"
    JWT_ISSUER: str = "HotelListingAPI"
    JWT_AUDIENCE: str = "HotelListingAPIClient"
    # Access token lifetime (minutes)
    JWT_DURATION_MINUTES: int = 10

    # Refresh Token Config
    # Refresh token lifetime (minutes), default one day
    REFRESH_TOKEN_LIFESPAN_MINUTES: int = 1440

    # CORS Config
    # Comma-separated list of allowed origins for CORS
    # Example: "http://localhost:3000,https://example.com"
    ALLOWED_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
