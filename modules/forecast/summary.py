"""
modules/forecast/summary.py
---------------------------
Aggregate view of a ForecastSet consumed by the packing recommender.
"""

from __future__ import annotations
from collections.abc import Sequence
from dataclasses import dataclass

from schemas.trip import DailyForecast
from modules.errors import InvalidInputError


@dataclass(frozen=True)
class ForecastSummary:
    avg_high: float
    avg_low: float
    has_rain: bool
    day_count: int


def summarize_forecast(forecast_set: Sequence[DailyForecast]) -> ForecastSummary:
    """Arithmetic means of highs/lows plus whether any day is rainy."""
    if forecast_set is None:
        raise InvalidInputError("Forecast set is empty")
    if not isinstance(forecast_set, Sequence):
        raise InvalidInputError(f"Malformed forecast set: {type(forecast_set).__name__}")
    if len(forecast_set) == 0:
        raise InvalidInputError("Forecast set is empty")
    for day in forecast_set:
        if not isinstance(day, DailyForecast):
            raise InvalidInputError(f"Malformed forecast entry: {day!r}")

    count = len(forecast_set)
    return ForecastSummary(
        avg_high=sum(d.high_f for d in forecast_set) / count,
        avg_low=sum(d.low_f for d in forecast_set) / count,
        has_rain=any(d.is_rainy for d in forecast_set),
        day_count=count,
    )
