"""modules/forecast: Synthetic per-day forecast and its summary."""

from modules.forecast.synthesizer import synthesize_forecast
from modules.forecast.summary import ForecastSummary, summarize_forecast

__all__ = [
    "synthesize_forecast",
    "ForecastSummary",
    "summarize_forecast",
]
