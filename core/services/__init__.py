# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .forecast_service import DEFAULT_FORECAST_DAYS, generate_forecast

__all__ = [
    "DEFAULT_FORECAST_DAYS",
    "generate_forecast",
]
