# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Weather API.
# It configures the FastAPI application with logging, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload --port 8080
#   poetry run weather-api
#   python -m app
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app import __version__
from app.config import Settings, get_settings
from app.exceptions import unexpected_exception_handler
from app.routers import weather

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(app_settings: Settings) -> None:
    """Set up root logging; verbosity follows the environment profile."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(app_settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing to open or close: the service holds no connections.
    Only logs startup and shutdown.
    """
    app_settings: Settings = app.state.settings

    logger.info(f"Starting Weather API in {app_settings.ENVIRONMENT} mode")
    logger.debug(f"Forecast settings: days={app_settings.FORECAST_DAYS}, "
                 f"range=[{app_settings.TEMPERATURE_MIN_C}, {app_settings.TEMPERATURE_MAX_C})")

    yield

    logger.info("Shutting down Weather API")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    The interactive docs (/docs, /redoc, /openapi.json) are only mounted
    in the Development profile; everywhere else they answer 404.

    Args:
        app_settings: Settings to use, defaults to the cached global ones

    Returns:
        Configured FastAPI instance
    """
    app_settings = app_settings or get_settings()
    configure_logging(app_settings)

    docs_enabled = app_settings.is_development

    app = FastAPI(
        title="Weather API",
        description="Returns a short, randomly generated weather forecast.",
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(Exception, unexpected_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(
        weather.router,
        tags=["WeatherForecast"]
    )

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn on API_HOST:API_PORT."""
    app_settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=app_settings.API_HOST,
        port=app_settings.API_PORT,
        log_level=app_settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
