# =============================================================================
# app/routers/weather.py - Weather Forecast Endpoint
# =============================================================================
# The only route the API serves. Read-only, no parameters, no side effects.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import SettingsDep
from core.models.forecast import ForecastRecord
from core.services.forecast_service import generate_forecast

router = APIRouter()


@router.get("/weatherforecast", response_model=list[ForecastRecord])
def get_weather_forecast(settings: SettingsDep):
    """
    Get a random weather forecast.

    Returns one record per day starting tomorrow, generated fresh on
    every call.
    """
    return generate_forecast(
        settings.FORECAST_DAYS,
        min_temperature_c=settings.TEMPERATURE_MIN_C,
        max_temperature_c=settings.TEMPERATURE_MAX_C,
        summaries=settings.summaries_list,
    )
