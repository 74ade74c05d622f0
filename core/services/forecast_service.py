# =============================================================================
# core/services/forecast_service.py - Forecast Generation
# =============================================================================
# Builds the list of random ForecastRecord values served by the API.
# Pure function: no I/O and no shared mutable state apart from the
# process-wide random generator.
# =============================================================================

import datetime
import logging
import random
from collections.abc import Sequence

from core.models.forecast import DEFAULT_SUMMARIES, ForecastRecord

logger = logging.getLogger(__name__)

DEFAULT_FORECAST_DAYS = 5
DEFAULT_MIN_TEMPERATURE_C = -20
DEFAULT_MAX_TEMPERATURE_C = 55

# Seeded from the OS once per process; not suitable for anything secret
_rng = random.Random()


def generate_forecast(
    days: int = DEFAULT_FORECAST_DAYS,
    *,
    min_temperature_c: int = DEFAULT_MIN_TEMPERATURE_C,
    max_temperature_c: int = DEFAULT_MAX_TEMPERATURE_C,
    summaries: Sequence[str] = DEFAULT_SUMMARIES,
    today: datetime.date | None = None,
    rng: random.Random | None = None,
) -> list[ForecastRecord]:
    """
    Generate a fresh forecast for the days following today.

    Args:
        days: Number of records to produce (one per day, starting tomorrow)
        min_temperature_c: Lowest possible temperature (inclusive)
        max_temperature_c: Upper temperature bound (exclusive)
        summaries: Words to pick the summary from; empty means no summary
        today: Reference day, defaults to date.today()
        rng: Random source, defaults to the module-level generator

    Returns:
        Ordered list of ForecastRecord, one per consecutive day

    Raises:
        ValueError: If days < 1 or the temperature range is empty
    """
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")
    if min_temperature_c >= max_temperature_c:
        raise ValueError(
            f"Empty temperature range: [{min_temperature_c}, {max_temperature_c})"
        )

    rng = rng or _rng
    today = today or datetime.date.today()

    records = [
        ForecastRecord(
            date=today + datetime.timedelta(days=offset),
            temperature_c=rng.randrange(min_temperature_c, max_temperature_c),
            summary=rng.choice(summaries) if summaries else None,
        )
        for offset in range(1, days + 1)
    ]

    logger.debug(f"Generated {len(records)} forecast records starting {records[0].date}")
    return records
