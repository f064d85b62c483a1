"""
schemas/trip.py
---------------
Dataclass definitions for the user-entered trip and its synthetic forecast.

TripSpec is owned by the WizardController and only mutated through the
helpers below. DailyForecast entries are immutable once generated; a full
ordered tuple of them is a "ForecastSet".
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class Conditions(str, Enum):
    SUNNY = "Sunny"
    PARTLY_CLOUDY = "Partly Cloudy"
    CLOUDY = "Cloudy"
    LIGHT_RAIN = "Light Rain"


def trip_duration_days(start: date, end: date) -> int:
    """Inclusive day count of [start, end]. Shared by the synthesizer and the wizard."""
    return (end - start).days + 1


@dataclass(frozen=True)
class DailyForecast:
    """One synthetic forecast day (temperatures in °F)."""
    date: date
    high_f: int
    low_f: int
    conditions: Conditions

    @property
    def is_rainy(self) -> bool:
        return self.conditions == Conditions.LIGHT_RAIN


@dataclass
class TripSpec:
    """
    Trip parameters collected by the wizard.

    start_date <= end_date is checked at wizard transitions, not here, so the
    user may enter the two dates in either order.
    """

    destination: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    activities: list[str] = field(default_factory=list)

    # ── Mutators ──────────────────────────────────────────────────────

    def set_destination(self, destination: str) -> None:
        self.destination = destination or ""

    def set_dates(self, start: Optional[date], end: Optional[date]) -> None:
        self.start_date = start
        self.end_date = end

    def add_activity(self, activity: str) -> bool:
        """Append an activity label. Blank input is ignored and returns False."""
        if not activity or not activity.strip():
            return False
        self.activities.append(activity)
        return True

    def remove_activity(self, index: int) -> str:
        """Remove the activity at display position `index` and return it."""
        if not 0 <= index < len(self.activities):
            raise IndexError(f"No activity at position {index}")
        return self.activities.pop(index)

    def clear(self) -> None:
        self.destination = ""
        self.start_date = None
        self.end_date = None
        self.activities = []

    # ── Derived ───────────────────────────────────────────────────────

    @property
    def has_dates(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    def duration_days(self) -> int:
        if not self.has_dates:
            raise ValueError("Trip dates are not set")
        return trip_duration_days(self.start_date, self.end_date)

    def duration_label(self) -> str:
        """Human readable duration, e.g. "1 day" / "5 days"; empty until both dates are set."""
        if not self.has_dates:
            return ""
        days = self.duration_days()
        return f"{days} day{'s' if days != 1 else ''}"
