"""
modules/wizard/controller.py
----------------------------
WizardController: four-step state machine driving one packing session.

    PLANNING(1) ──advance──▶ CONFIRM(2) ──advance──▶ FORECAST(3) ──advance──▶ PACKING(4)
                ◀──back────              ◀──back────               ◀──back────

advance() from CONFIRM / FORECAST runs the forecast synthesizer / packing
recommender as an awaited operation. While it is pending `is_generating` is
True and further advance()/back() calls are no-ops; the flag is cleared only
after the result has been committed.

back() never clears derived data, and editing the trip does not invalidate
it either; `forecast_is_stale` / `packing_is_stale` report when the stored
results no longer match the current trip.

Lifecycle:
    wizard = WizardController(search=DestinationSearch())
    wizard.update_destination("Paris, France")
    wizard.update_dates(date(2024, 6, 1), date(2024, 6, 3))
    await wizard.advance()            # → CONFIRM
    wizard.add_activity("golf")
    await wizard.advance()            # → FORECAST (wizard.forecast_set)
    await wizard.advance()            # → PACKING  (wizard.packing_list)
"""

from __future__ import annotations
import asyncio
import logging
import random
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Any, Callable, Optional, Sequence

from schemas.packing import PackingList
from schemas.trip import DailyForecast, TripSpec
from modules.errors import InvalidInputError, PackingPlannerError, ValidationError
from modules.forecast.synthesizer import synthesize_forecast
from modules.recommendation.packing_recommender import PackingRecommender
from modules.search.destination_search import DestinationSearch
import config

logger = logging.getLogger(__name__)

Forecaster = Callable[[date, date, Any], Sequence[DailyForecast]]
Recommender = Callable[[Sequence[DailyForecast], Sequence[str], int], PackingList]


class WizardStep(IntEnum):
    PLANNING = 1
    CONFIRM = 2
    FORECAST = 3
    PACKING = 4

    @property
    def title(self) -> str:
        return _STEP_TITLES[self]


_STEP_TITLES: dict[WizardStep, str] = {
    WizardStep.PLANNING: "Trip Details",
    WizardStep.CONFIRM:  "Activities",
    WizardStep.FORECAST: "Weather Forecast",
    WizardStep.PACKING:  "Packing List",
}


@dataclass(frozen=True)
class WizardSnapshot:
    """Read-only view handed to surfaces (terminal, HTTP)."""
    step: WizardStep
    destination: str
    start_date: Optional[date]
    end_date: Optional[date]
    activities: tuple[str, ...]
    duration_label: str
    forecast_set: Optional[tuple[DailyForecast, ...]]
    packing_list: Optional[PackingList]
    is_generating: bool
    suggestions: tuple[str, ...]
    suggestions_visible: bool
    suggestions_loading: bool
    last_error: str
    forecast_is_stale: bool
    packing_is_stale: bool


class WizardController:
    """
    Single owner of the TripSpec, ForecastSet and PackingList for a session.
    """

    def __init__(
        self,
        search: Optional[DestinationSearch] = None,
        forecaster: Forecaster = synthesize_forecast,
        recommender: Optional[Recommender] = None,
        rng: Optional[Any] = None,
        forecast_delay: float = config.FORECAST_DELAY_SECONDS,
        packing_delay: float = config.PACKING_DELAY_SECONDS,
        trip: Optional[TripSpec] = None,
    ) -> None:
        self.trip = trip if trip is not None else TripSpec()
        self.search = search
        self.step = WizardStep.PLANNING
        self.forecast_set: Optional[tuple[DailyForecast, ...]] = None
        self.packing_list: Optional[PackingList] = None
        self.is_generating = False
        self.last_error = ""

        self._forecaster = forecaster
        self._recommender = recommender or PackingRecommender().recommend
        self._rng = rng if rng is not None else random.Random()
        self._forecast_delay = forecast_delay
        self._packing_delay = packing_delay

        # Inputs the stored results were generated from (staleness checks)
        self._forecast_inputs: Optional[tuple[date, date]] = None
        self._packing_inputs: Optional[tuple] = None

    # ── Navigation ────────────────────────────────────────────────────

    async def advance(self) -> WizardStep:
        """Move forward one step; see module docstring for per-step behaviour."""
        if self.is_generating:
            logger.debug("advance() ignored: generation in progress")
            return self.step

        if self.step == WizardStep.PLANNING:
            self._validate_trip()
            self.last_error = ""
            self.step = WizardStep.CONFIRM
        elif self.step == WizardStep.CONFIRM:
            self._validate_trip()
            await self._generate_forecast()
        elif self.step == WizardStep.FORECAST:
            self._validate_trip()
            await self._generate_packing_list()
        # PACKING: nothing further forward

        return self.step

    def back(self) -> WizardStep:
        if self.is_generating:
            logger.debug("back() ignored: generation in progress")
            return self.step
        if self.step > WizardStep.PLANNING:
            self.step = WizardStep(self.step - 1)
            self.last_error = ""
        return self.step

    def reset(self) -> None:
        """Start over with an empty trip."""
        self.trip.clear()
        self.step = WizardStep.PLANNING
        self.forecast_set = None
        self.packing_list = None
        self.last_error = ""
        self._forecast_inputs = None
        self._packing_inputs = None
        if self.search is not None:
            self.search.hide()

    # ── Trip edits (allowed in any step) ──────────────────────────────

    def update_destination(self, text: str) -> None:
        """Set the destination text and feed the autocomplete (needs a running loop)."""
        self.trip.set_destination(text)
        if self.search is not None:
            self.search.on_input(self.trip.destination)

    def select_destination(self, suggestion: str) -> None:
        if self.search is not None:
            suggestion = self.search.select(suggestion)
        self.trip.set_destination(suggestion)

    def update_dates(self, start: Optional[date], end: Optional[date]) -> None:
        self.trip.set_dates(start, end)

    def add_activity(self, activity: str) -> bool:
        return self.trip.add_activity(activity)

    def remove_activity(self, index: int) -> str:
        return self.trip.remove_activity(index)

    # ── Validation ────────────────────────────────────────────────────

    def _validate_trip(self) -> None:
        trip = self.trip
        if not trip.destination.strip() or not trip.has_dates:
            self._fail("Please fill in all fields")
        if trip.start_date > trip.end_date:
            self._fail("End date must be on or after the start date")

    def _fail(self, message: str) -> None:
        self.last_error = message
        raise ValidationError(message)

    # ── Generation ────────────────────────────────────────────────────

    async def _generate_forecast(self) -> None:
        start, end = self.trip.start_date, self.trip.end_date
        self.is_generating = True
        try:
            await asyncio.sleep(self._forecast_delay)
            forecast = tuple(self._forecaster(start, end, self._rng))
            self.forecast_set = forecast
            self._forecast_inputs = (start, end)
            self.step = WizardStep.FORECAST
            self.last_error = ""
            logger.info("Forecast ready: %d days from %s", len(forecast), start)
        except PackingPlannerError as exc:
            self.last_error = str(exc)
            raise
        finally:
            self.is_generating = False

    async def _generate_packing_list(self) -> None:
        if not self.forecast_set:
            self.last_error = "No forecast available"
            raise InvalidInputError(self.last_error)

        forecast = self.forecast_set
        activities = tuple(self.trip.activities)
        days = self.trip.duration_days()
        self.is_generating = True
        try:
            await asyncio.sleep(self._packing_delay)
            packing = self._recommender(forecast, list(activities), days)
            self.packing_list = packing
            self._packing_inputs = (forecast, activities, days)
            self.step = WizardStep.PACKING
            self.last_error = ""
            logger.info("Packing list ready: %d items for %d days", len(packing), days)
        except PackingPlannerError as exc:
            self.last_error = str(exc)
            raise
        finally:
            self.is_generating = False

    # ── Derived views ─────────────────────────────────────────────────

    @property
    def forecast_is_stale(self) -> bool:
        if self.forecast_set is None:
            return False
        return self._forecast_inputs != (self.trip.start_date, self.trip.end_date)

    @property
    def packing_is_stale(self) -> bool:
        if self.packing_list is None:
            return False
        days = self.trip.duration_days() if self.trip.has_dates else None
        return self._packing_inputs != (self.forecast_set, tuple(self.trip.activities), days)

    @property
    def suggestions(self) -> list[str]:
        return list(self.search.suggestions) if self.search is not None else []

    def snapshot(self) -> WizardSnapshot:
        return WizardSnapshot(
            step=self.step,
            destination=self.trip.destination,
            start_date=self.trip.start_date,
            end_date=self.trip.end_date,
            activities=tuple(self.trip.activities),
            duration_label=self.trip.duration_label(),
            forecast_set=self.forecast_set,
            packing_list=self.packing_list,
            is_generating=self.is_generating,
            suggestions=tuple(self.suggestions),
            suggestions_visible=bool(self.search and self.search.visible),
            suggestions_loading=bool(self.search and self.search.is_loading),
            last_error=self.last_error,
            forecast_is_stale=self.forecast_is_stale,
            packing_is_stale=self.packing_is_stale,
        )
