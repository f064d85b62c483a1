"""
modules/tool_usage/geocoding_tool.py
-------------------------------------
Place-name autocomplete against a Mapbox-style geocoding endpoint.

Boundary contract: search(query) -> ranked list of formatted place names.
Any failure (network, non-2xx, malformed payload) is logged and yields [];
nothing propagates to the wizard.
"""

from __future__ import annotations
import logging
from typing import Any
from urllib.parse import quote

import requests

from modules.errors import SearchFailure
import config

logger = logging.getLogger(__name__)

# Answers used when no API key is configured.
_PLACE_STUBS: tuple[str, ...] = (
    "Paris, France",
    "Paris, Texas, United States",
    "London, Greater London, England, United Kingdom",
    "London, Ontario, Canada",
    "Barcelona, Catalonia, Spain",
    "Berlin, Germany",
    "Lisbon, Portugal",
    "Rome, Lazio, Italy",
    "Tokyo, Japan",
    "New York, New York, United States",
    "San Francisco, California, United States",
    "Seattle, Washington, United States",
    "Sydney, New South Wales, Australia",
    "Cape Town, Western Cape, South Africa",
)


class GeocodingTool:
    """Wraps the external geocoding API."""

    def __init__(
        self,
        api_url: str = config.GEOCODING_API_URL,
        api_key: str = config.GEOCODING_API_KEY,
        limit: int = config.GEOCODING_RESULT_LIMIT,
        place_types: str = config.GEOCODING_PLACE_TYPES,
        timeout: float = config.HTTP_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.limit = limit
        self.place_types = place_types
        self.timeout = timeout
        self.session = session or requests.Session()

    def search(self, query: str) -> list[str]:
        """
        Ranked place names for `query`; [] on any failure.

        Blocking; DestinationSearch runs it off the event loop.
        """
        query = (query or "").strip()
        if not query:
            return []

        if not self.api_key:
            logger.info("[DUMMY API] GeocodingTool.search(%r): answering from stub list", query)
            return self._stub_search(query)

        try:
            return self._fetch(query)
        except SearchFailure as exc:
            logger.warning("Destination search for %r failed: %s", query, exc)
            return []

    def _fetch(self, query: str) -> list[str]:
        url = f"{self.api_url}/{quote(query, safe='')}.json"
        params: dict[str, Any] = {
            "access_token": self.api_key,
            "types": self.place_types,
            "limit": self.limit,
        }
        try:
            response = self.session.get(
                url, params=params, headers={"Accept": "application/json"}, timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise SearchFailure(str(exc)) from exc
        except ValueError as exc:
            raise SearchFailure(f"invalid JSON: {exc}") from exc

        return self._parse_places(payload)

    @staticmethod
    def _parse_places(payload: Any) -> list[str]:
        if not isinstance(payload, dict):
            raise SearchFailure("payload is not an object")
        features = payload.get("features") or []
        if not isinstance(features, list):
            raise SearchFailure("'features' is not a list")
        return [
            f["place_name"]
            for f in features
            if isinstance(f, dict) and isinstance(f.get("place_name"), str)
        ]

    def _stub_search(self, query: str) -> list[str]:
        q = query.lower()
        prefix = [p for p in _PLACE_STUBS if p.lower().startswith(q)]
        inner = [p for p in _PLACE_STUBS if q in p.lower() and p not in prefix]
        return (prefix + inner)[: self.limit]
