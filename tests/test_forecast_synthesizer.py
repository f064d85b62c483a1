import pytest
import random
from datetime import date, timedelta

from schemas.trip import Conditions, DailyForecast
from modules.errors import InvalidInputError
from modules.forecast.summary import summarize_forecast
from modules.forecast.synthesizer import synthesize_forecast


class ScriptedRandom:
    """Deterministic stand-in for random.Random."""

    def __init__(self, ints, choice_indexes):
        self._ints = iter(ints)
        self._choices = iter(choice_indexes)
        self.ranges = []

    def randint(self, a, b):
        self.ranges.append((a, b))
        return next(self._ints)

    def choice(self, seq):
        return seq[next(self._choices)]


@pytest.mark.parametrize("start, end, expected", [
    (date(2024, 6, 1), date(2024, 6, 1), 1),
    (date(2024, 6, 1), date(2024, 6, 3), 3),
    (date(2024, 2, 27), date(2024, 3, 2), 5),      # leap day
    (date(2023, 12, 30), date(2024, 1, 14), 16),
])
def test_one_entry_per_calendar_day(start, end, expected):
    forecast = synthesize_forecast(start, end, random.Random(7))
    assert len(forecast) == expected
    assert forecast[0].date == start
    assert forecast[-1].date == end
    for prev, nxt in zip(forecast, forecast[1:]):
        assert nxt.date - prev.date == timedelta(days=1)


def test_values_stay_in_configured_ranges():
    forecast = synthesize_forecast(date(2024, 1, 1), date(2024, 3, 31), random.Random(123))
    assert all(65 <= d.high_f <= 79 for d in forecast)
    assert all(45 <= d.low_f <= 59 for d in forecast)
    assert {d.conditions for d in forecast} <= set(Conditions)


def test_injected_source_drives_every_value():
    rng = ScriptedRandom(ints=[70, 50, 79, 45], choice_indexes=[3, 0])
    forecast = synthesize_forecast(date(2024, 6, 1), date(2024, 6, 2), rng)

    assert forecast == (
        DailyForecast(date(2024, 6, 1), 70, 50, Conditions.LIGHT_RAIN),
        DailyForecast(date(2024, 6, 2), 79, 45, Conditions.SUNNY),
    )
    assert rng.ranges == [(65, 79), (45, 59), (65, 79), (45, 59)]


def test_same_seed_same_forecast():
    a = synthesize_forecast(date(2024, 6, 1), date(2024, 6, 10), random.Random(99))
    b = synthesize_forecast(date(2024, 6, 1), date(2024, 6, 10), random.Random(99))
    assert a == b


def test_default_source_is_used_when_none_given():
    forecast = synthesize_forecast(date(2024, 6, 1), date(2024, 6, 2))
    assert len(forecast) == 2


def test_end_before_start_is_rejected():
    with pytest.raises(InvalidInputError, match="before start"):
        synthesize_forecast(date(2024, 6, 3), date(2024, 6, 1))


@pytest.mark.parametrize("start, end", [(None, date(2024, 6, 1)), (date(2024, 6, 1), None), ("2024-06-01", "2024-06-02")])
def test_missing_dates_are_rejected(start, end):
    with pytest.raises(InvalidInputError):
        synthesize_forecast(start, end)


def test_forecast_entries_are_immutable():
    day = synthesize_forecast(date(2024, 6, 1), date(2024, 6, 1), random.Random(1))[0]
    with pytest.raises(AttributeError):
        day.high_f = 100


def test_summary_averages_and_rain():
    forecast = (
        DailyForecast(date(2024, 6, 1), 70, 50, Conditions.SUNNY),
        DailyForecast(date(2024, 6, 2), 75, 55, Conditions.LIGHT_RAIN),
        DailyForecast(date(2024, 6, 3), 77, 51, Conditions.CLOUDY),
    )
    summary = summarize_forecast(forecast)
    assert summary.avg_high == pytest.approx(74.0)
    assert summary.avg_low == pytest.approx(52.0)
    assert summary.has_rain
    assert summary.day_count == 3


def test_summary_rejects_empty_set():
    with pytest.raises(InvalidInputError):
        summarize_forecast([])
