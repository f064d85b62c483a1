"""
modules/recommendation/packing_recommender.py
----------------------------------------------
Rule-based packing list generation.

Pipeline (pure, deterministic given its inputs):
    1. BASE_ITEMS
    2. weather items   : exactly one temperature bracket by avg_high, plus
                         COLD_EXTRAS if avg_low < 35°F, plus RAIN_GEAR if any
                         day is rainy (the three rules are additive)
    3. activity items  : every ActivityRule matching every activity string
    4. merge base + weather + activity, first occurrence of a name wins
    5. quantities      : Underwear/Socks: days + 1
                         Clothing named *shirt* / *T-shirt*: ceil(days / 2)
                         everything else: 1
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, Sequence

from schemas.packing import ItemCategory, ItemTemplate, PackingItem, PackingList
from schemas.trip import DailyForecast
from modules.errors import InvalidInputError
from modules.forecast.summary import ForecastSummary, summarize_forecast
from modules.recommendation.packing_rules import (
    ACTIVITY_RULES,
    BASE_ITEMS,
    COLD_EXTRAS,
    COLD_LOW_THRESHOLD_F,
    DAILY_ITEMS,
    RAIN_GEAR,
    SHIRT_MARKERS,
    TEMPERATURE_BRACKETS,
    ActivityRule,
)

logger = logging.getLogger(__name__)


def weather_items(summary: ForecastSummary) -> list[ItemTemplate]:
    """Bracket items, then cold extras, then rain gear."""
    items: list[ItemTemplate] = []
    for threshold, bracket in TEMPERATURE_BRACKETS:
        if threshold is None or summary.avg_high > threshold:
            items.extend(bracket)
            break
    if summary.avg_low < COLD_LOW_THRESHOLD_F:
        items.extend(COLD_EXTRAS)
    if summary.has_rain:
        items.extend(RAIN_GEAR)
    return items


def activity_items(
    activities: Iterable[str],
    rules: Sequence[ActivityRule] = ACTIVITY_RULES,
) -> list[ItemTemplate]:
    """Items from every rule matching each activity; unmatched activities add nothing."""
    items: list[ItemTemplate] = []
    for activity in activities:
        for rule in rules:
            if rule.matches(activity):
                items.extend(rule.items)
    return items


def dedupe(items: Iterable[ItemTemplate]) -> list[ItemTemplate]:
    """Drop repeated names, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[ItemTemplate] = []
    for item in items:
        if item.name not in seen:
            seen.add(item.name)
            unique.append(item)
    return unique


def quantity_for(item: ItemTemplate, trip_duration_days: int) -> int:
    if item.name in DAILY_ITEMS:
        return trip_duration_days + 1
    if item.category == ItemCategory.CLOTHING and any(m in item.name for m in SHIRT_MARKERS):
        return math.ceil(trip_duration_days / 2)
    return 1


def _check_inputs(activities: Sequence[str], trip_duration_days: int) -> None:
    if isinstance(trip_duration_days, bool) or not isinstance(trip_duration_days, int):
        raise InvalidInputError(f"trip_duration_days must be an int, got {trip_duration_days!r}")
    if trip_duration_days <= 0:
        raise InvalidInputError(f"trip_duration_days must be positive, got {trip_duration_days}")
    if isinstance(activities, str) or not all(isinstance(a, str) for a in activities):
        raise InvalidInputError("activities must be a sequence of strings")


def generate_packing_list(
    forecast_set: Sequence[DailyForecast],
    activities: Sequence[str],
    trip_duration_days: int,
    rules: Sequence[ActivityRule] = ACTIVITY_RULES,
) -> PackingList:
    """
    Build the deduplicated, quantified packing list.

    Raises:
        InvalidInputError: empty/malformed forecast, non-positive duration,
                           or activities that are not strings.
    """
    _check_inputs(activities, trip_duration_days)
    summary = summarize_forecast(forecast_set)

    candidates = [*BASE_ITEMS, *weather_items(summary), *activity_items(activities, rules)]
    unique = dedupe(candidates)
    logger.debug(
        "Packing list: %d candidates → %d unique (avg_high=%.1f avg_low=%.1f rain=%s)",
        len(candidates), len(unique), summary.avg_high, summary.avg_low, summary.has_rain,
    )

    return PackingList(items=tuple(
        PackingItem(t.name, t.category, quantity_for(t, trip_duration_days))
        for t in unique
    ))


class PackingRecommender:
    """Object wrapper so the wizard can hold a swappable recommender."""

    def __init__(self, rules: Sequence[ActivityRule] = ACTIVITY_RULES):
        self.rules = tuple(rules)

    def recommend(
        self,
        forecast_set: Sequence[DailyForecast],
        activities: Sequence[str],
        trip_duration_days: int,
    ) -> PackingList:
        return generate_packing_list(forecast_set, activities, trip_duration_days, self.rules)
