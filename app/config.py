# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.ENVIRONMENT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The environment profile can also be given as ASPNETCORE_ENVIRONMENT so the
# env files written for the original deployment keep working.
# =============================================================================

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models.forecast import DEFAULT_SUMMARIES
from core.services.forecast_service import (
    DEFAULT_FORECAST_DAYS,
    DEFAULT_MAX_TEMPERATURE_C,
    DEFAULT_MIN_TEMPERATURE_C,
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: str = Field(
        default="Development",
        validation_alias=AliasChoices("ENVIRONMENT", "ASPNETCORE_ENVIRONMENT"),
        description="Environment profile name; only Development enables dev-only diagnostics"
    )

    DEBUG: bool = Field(
        default=False,
        description="Force verbose logging regardless of the profile"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Forecast Generation
    # -------------------------------------------------------------------------
    # Template defaults; they carry no business meaning

    FORECAST_DAYS: int = Field(
        default=DEFAULT_FORECAST_DAYS,
        ge=1,
        le=30,
        description="Number of days returned by /weatherforecast"
    )

    TEMPERATURE_MIN_C: int = Field(
        default=DEFAULT_MIN_TEMPERATURE_C,
        description="Lowest generated temperature in Celsius (inclusive)"
    )

    TEMPERATURE_MAX_C: int = Field(
        default=DEFAULT_MAX_TEMPERATURE_C,
        description="Upper bound of generated temperatures in Celsius (exclusive)"
    )

    # Comma-separated string that gets parsed
    FORECAST_SUMMARIES: str = Field(
        default=",".join(DEFAULT_SUMMARIES),
        description="Summary words to pick from (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat VAR= as unset so defaults apply
        env_ignore_empty=True,
        case_sensitive=True,
        # .env files may carry variables meant for other services (e.g. the db)
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("ENVIRONMENT", mode="before")
    @classmethod
    def normalize_environment(cls, value):
        """Accept profile names in any case: "production" -> "Production"."""
        if isinstance(value, str):
            return value.strip().capitalize()
        return value

    @model_validator(mode="after")
    def check_temperature_range(self) -> "Settings":
        if self.TEMPERATURE_MIN_C >= self.TEMPERATURE_MAX_C:
            raise ValueError(
                f"TEMPERATURE_MIN_C ({self.TEMPERATURE_MIN_C}) must be lower than "
                f"TEMPERATURE_MAX_C ({self.TEMPERATURE_MAX_C})"
            )
        return self

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def summaries_list(self) -> list[str]:
        """
        Parse FORECAST_SUMMARIES string into a list.

        Blank entries are dropped, so an empty string means "no summary".
        Example: "Cold, Hot" -> ["Cold", "Hot"]
        """
        return [word.strip() for word in self.FORECAST_SUMMARIES.split(",") if word.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in the Development profile."""
        return self.ENVIRONMENT == "Development"

    @property
    def is_production(self) -> bool:
        """Check if running in the Production profile."""
        return self.ENVIRONMENT == "Production"

    @property
    def log_level(self) -> str:
        """DEBUG in Development or when DEBUG is set, INFO otherwise."""
        return "DEBUG" if self.DEBUG or self.is_development else "INFO"


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
