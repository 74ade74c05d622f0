# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Weather API:
# - test_models.py: ForecastRecord validation and serialization
# - test_forecast_service.py: Forecast generation rules
# - test_config.py: Settings loading and profile handling
# - test_weather_api.py: HTTP behavior of the running app
# - test_container.py: Dockerfiles and compose descriptor
#
# Run tests with: poetry run pytest
# =============================================================================
