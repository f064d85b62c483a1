"""
config.py
---------
Central configuration for the packing planner.
All secrets loaded from environment variables, never hard-coded.
"""

import os

# ── Geocoding (destination autocomplete) ─────────────────────────────────────
# Leave GEOCODING_API_KEY empty to answer from the built-in city stub list.
GEOCODING_API_URL: str = os.getenv(
    "GEOCODING_API_URL", "https://api.mapbox.com/geocoding/v5/mapbox.places"
)
GEOCODING_API_KEY: str = os.getenv("GEOCODING_API_KEY", "")
GEOCODING_PLACE_TYPES: str = os.getenv("GEOCODING_PLACE_TYPES", "place")
GEOCODING_RESULT_LIMIT: int = int(os.getenv("GEOCODING_RESULT_LIMIT", "10"))
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# ── Destination search behaviour ─────────────────────────────────────────────
SEARCH_DEBOUNCE_SECONDS: float = float(os.getenv("SEARCH_DEBOUNCE_SECONDS", "0.3"))
SEARCH_MIN_QUERY_LENGTH: int = int(os.getenv("SEARCH_MIN_QUERY_LENGTH", "2"))

# ── Synthetic forecast (°F, inclusive bounds) ────────────────────────────────
FORECAST_HIGH_RANGE_F: tuple[int, int] = (65, 79)
FORECAST_LOW_RANGE_F: tuple[int, int] = (45, 59)

# ── Generation delays (seconds) ──────────────────────────────────────────────
# Simulated latency of the forecast / packing steps. 0 disables the wait.
FORECAST_DELAY_SECONDS: float = float(os.getenv("FORECAST_DELAY_SECONDS", "0.0"))
PACKING_DELAY_SECONDS: float = float(os.getenv("PACKING_DELAY_SECONDS", "0.0"))

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── HTTP API ─────────────────────────────────────────────────────────────────
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))
