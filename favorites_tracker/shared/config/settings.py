# 📄 File: favorites_tracker/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# Reads FavoritesTracker's knobs (which Supabase project to talk to, how loudly to log,
# how big an uploaded photo may be) from the environment or a .env file.
#
# 🧪 Purpose (Technical Summary):
# A pydantic-settings model with field validators that normalise environment, log level,
# log format and backend URLs, plus a process-wide cached instance via get_settings().
#
# 🔗 Dependencies:
# - pydantic / pydantic-settings
# - python-dotenv (.env source used by pydantic-settings)
#
# 🔄 Connected Modules / Calls From:
# - favorites_tracker.main (application startup)
# - favorites_tracker.shared.config.supabase (client construction)
# - Repository provider and Supabase storage repository
# - favorites_tracker.shared.utils.logging

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "staging", "production", "test")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """
    FavoritesTracker configuration.

    Field names match the environment variables they are read from; values in the
    process environment take precedence over `.env`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION
    # =========================================================================

    APP_NAME: str = Field(default="FavoritesTracker", description="Name used in lifecycle logs")
    APP_VERSION: str = Field(default="1.0.0", description="Version used in lifecycle logs")
    ENVIRONMENT: str = Field(default="development", description="development, staging, production or test")

    # =========================================================================
    # LOGGING
    # =========================================================================

    LOG_LEVEL: str = Field(default="INFO", description="Root logger level")
    LOG_FORMAT: str = Field(default="text", description="json or text")
    LOG_FILE: Optional[str] = Field(None, description="Also write logs to this file when set")

    # =========================================================================
    # SUPABASE
    # =========================================================================

    SUPABASE_URL: str = Field(default="http://localhost:54321", description="Supabase project URL")
    SUPABASE_ANON_KEY: str = Field(default="", description="Public anon key")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(
        None,
        description="Service role key; account deletion is unavailable without it"
    )
    SUPABASE_LOCAL_URL: str = Field(
        default="http://127.0.0.1:54321",
        description="Local Supabase stack URL used by configure_for_testing"
    )

    # Storage
    SUPABASE_STORAGE_BUCKET: str = Field(
        default="favorites-images",
        description="Bucket for item, collection and profile images"
    )
    MAX_IMAGE_SIZE_BYTES: int = Field(default=10 * 1024 * 1024, description="Largest accepted upload")
    IMAGE_DOWNLOAD_TIMEOUT: int = Field(default=30, description="Seconds allowed for an image download")

    # Client timeouts (seconds)
    SUPABASE_POSTGREST_TIMEOUT: int = Field(default=10)
    SUPABASE_STORAGE_TIMEOUT: int = Field(default=20)

    # =========================================================================
    # DEPENDENCY CONTAINER
    # =========================================================================

    FREEZE_CONTAINER_ON_STARTUP: bool = Field(
        default=False,
        description="Reject registrations once application startup has completed"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def normalise_environment(cls, value: str) -> str:
        value = value.lower()
        if value not in ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got '{value}'")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return value

    @field_validator("LOG_FORMAT")
    @classmethod
    def normalise_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be json or text, got '{value}'")
        return value

    @field_validator("SUPABASE_URL", "SUPABASE_LOCAL_URL")
    @classmethod
    def strip_url(cls, value: str) -> str:
        """Require an http(s) scheme and drop any trailing slash."""
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Supabase URL needs an http:// or https:// scheme: {value}")
        return value.rstrip("/")

    @field_validator("MAX_IMAGE_SIZE_BYTES", "IMAGE_DOWNLOAD_TIMEOUT")
    @classmethod
    def require_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"

    @property
    def supabase_storage_url(self) -> str:
        """Base URL of the Storage API for this project."""
        return f"{self.SUPABASE_URL}/storage/v1"


@lru_cache()
def get_settings() -> Settings:
    """
    Settings for the current process, built on first use.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return Settings()
