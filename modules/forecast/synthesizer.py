"""
modules/forecast/synthesizer.py
-------------------------------
Synthetic per-day forecast for the trip window.

Placeholder for a real forecast provider: the contract is
    (start, end, rng) -> ForecastSet
so a provider backed by a weather API can replace it without touching the
packing recommender. The random source is injected; pass a seeded
random.Random (or any object with randint/choice) for reproducible output.
"""

from __future__ import annotations
import random
from datetime import date, timedelta
from typing import Any, Optional

from schemas.trip import Conditions, DailyForecast, trip_duration_days
from modules.errors import InvalidInputError
import config


def synthesize_forecast(
    start: date,
    end: date,
    rng: Optional[Any] = None,
) -> tuple[DailyForecast, ...]:
    """
    Generate one DailyForecast per calendar day in [start, end].

    Args:
        start: First day of the trip (inclusive).
        end:   Last day of the trip (inclusive), >= start.
        rng:   Random source exposing randint(a, b) and choice(seq).

    Returns:
        Tuple of DailyForecast ordered by date, len == inclusive day count.
    """
    if not isinstance(start, date) or not isinstance(end, date):
        raise InvalidInputError("Forecast needs both a start and an end date")
    if end < start:
        raise InvalidInputError(f"End date {end} is before start date {start}")

    rng = rng if rng is not None else random.Random()
    high_lo, high_hi = config.FORECAST_HIGH_RANGE_F
    low_lo, low_hi = config.FORECAST_LOW_RANGE_F
    conditions = list(Conditions)

    days: list[DailyForecast] = []
    for offset in range(trip_duration_days(start, end)):
        days.append(
            DailyForecast(
                date=start + timedelta(days=offset),
                high_f=rng.randint(high_lo, high_hi),
                low_f=rng.randint(low_lo, low_hi),
                conditions=rng.choice(conditions),
            )
        )
    return tuple(days)
