# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - forecast.py: ForecastRecord schema and temperature conversion
#
# These models define the "contract" between API and clients.
# =============================================================================

from .forecast import (
    CELSIUS_PER_FAHRENHEIT_DEGREE,
    DEFAULT_SUMMARIES,
    ForecastRecord,
    celsius_to_fahrenheit,
)

__all__ = [
    "CELSIUS_PER_FAHRENHEIT_DEGREE",
    "DEFAULT_SUMMARIES",
    "ForecastRecord",
    "celsius_to_fahrenheit",
]
