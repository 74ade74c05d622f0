# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# - weather.py: The weather forecast endpoint
#
# Each router is mounted in main.py.
# =============================================================================

from . import weather

__all__ = [
    "weather",
]
