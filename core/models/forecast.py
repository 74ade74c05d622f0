# =============================================================================
# core/models/forecast.py - Forecast Schemas
# =============================================================================
# These models define the API contract for the forecast endpoint:
# - ForecastRecord: One generated weather entry
# - celsius_to_fahrenheit: The fixed conversion used for temperatureF
#
# Records are generated per request and thrown away after serialization.
# They have no identity and are never mutated.
# =============================================================================

import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Template defaults. Overridable through app.config.Settings.
DEFAULT_SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

# Approximation of 5/9 used by the conversion below
CELSIUS_PER_FAHRENHEIT_DEGREE = 0.5556


def celsius_to_fahrenheit(temperature_c: int) -> int:
    """
    Convert a Celsius reading to whole degrees Fahrenheit.

    The fractional part is truncated toward zero, so -20C -> -3F
    and 55C -> 130F.

    Example:
        celsius_to_fahrenheit(0)   # 32
        celsius_to_fahrenheit(25)  # 76
    """
    return 32 + int(temperature_c / CELSIUS_PER_FAHRENHEIT_DEGREE)


class ForecastRecord(BaseModel):
    """
    Schema for one forecast entry returned by GET /weatherforecast.

    temperatureF is derived from temperatureC and is never accepted
    as input.

    Example:
        {
            "date": "2024-01-16",
            "temperatureC": 12,
            "temperatureF": 53,
            "summary": "Cool"
        }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Calendar day this entry forecasts
    date: datetime.date = Field(
        ...,
        description="Forecast day (ISO-8601 date)"
    )

    temperature_c: int = Field(
        ...,
        alias="temperatureC",
        description="Temperature in degrees Celsius"
    )

    # None when no summary words are configured
    summary: str | None = Field(
        default=None,
        description="Short description of the weather"
    )

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        """Temperature in degrees Fahrenheit."""
        return celsius_to_fahrenheit(self.temperature_c)
