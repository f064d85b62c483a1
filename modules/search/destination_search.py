"""
modules/search/destination_search.py
-------------------------------------
Debounced, stale-guarded destination autocomplete for one wizard session.

Behaviour
─────────
- Every keystroke cancels the owned debounce timer and re-arms it; only input
  that stays quiet for `debounce_seconds` issues a request.
- Queries shorter than `min_query_length` never issue a request. They clear
  and hide the suggestions and invalidate anything still in flight.
- Requests are tagged with an increasing sequence number. A response is only
  applied if no newer request has been issued since; superseded requests are
  left to finish and are discarded (arrival order is irrelevant).
- The fetch function never raises past this component: failures are logged
  and treated as an empty result.
"""

from __future__ import annotations
import asyncio
import inspect
import logging
from typing import Awaitable, Callable, Optional, Sequence, Union

import config

logger = logging.getLogger(__name__)

# Blocking fetchers are run in a worker thread; coroutine functions are awaited.
FetchFn = Callable[[str], Union[Sequence[str], Awaitable[Sequence[str]]]]


class DestinationSearch:
    """Owns the debounce timer, request sequencing and displayed suggestions."""

    def __init__(
        self,
        fetch: Optional[FetchFn] = None,
        debounce_seconds: float = config.SEARCH_DEBOUNCE_SECONDS,
        min_query_length: int = config.SEARCH_MIN_QUERY_LENGTH,
        on_update: Optional[Callable[[list[str]], None]] = None,
    ):
        if fetch is None:
            from modules.tool_usage.geocoding_tool import GeocodingTool
            fetch = GeocodingTool().search
        self._fetch = fetch
        self._fetch_is_async = inspect.iscoroutinefunction(fetch) or inspect.iscoroutinefunction(
            getattr(fetch, "__call__", None)
        )
        self.debounce_seconds = debounce_seconds
        self.min_query_length = min_query_length
        self._on_update = on_update

        self.suggestions: list[str] = []
        self.visible: bool = False
        self.is_loading: bool = False
        self.query: str = ""

        self._timer: Optional[asyncio.TimerHandle] = None
        self._latest_seq: int = 0
        self._inflight: set[asyncio.Task] = set()

    # ── Input ─────────────────────────────────────────────────────────

    def on_input(self, query: str) -> None:
        """Register a keystroke. Must be called with a running event loop."""
        self.query = query or ""
        self._cancel_timer()

        if len(self.query) < self.min_query_length:
            self._latest_seq += 1     # any in-flight response is now stale
            self._set_suggestions([])
            self.visible = False
            self.is_loading = False
            return

        self.visible = True
        self.is_loading = True
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.debounce_seconds, self._issue, self.query)

    def select(self, suggestion: str) -> str:
        """User picked a suggestion: hide the dropdown and hand back the name."""
        self._cancel_timer()
        self._latest_seq += 1     # any in-flight response is now stale
        self.visible = False
        self.is_loading = False
        return suggestion

    def hide(self) -> None:
        self.visible = False

    # ── Requests ──────────────────────────────────────────────────────

    def _issue(self, query: str) -> None:
        self._timer = None
        self._latest_seq += 1
        seq = self._latest_seq
        logger.debug("Destination search #%d for %r", seq, query)
        task = asyncio.get_running_loop().create_task(self._run(seq, query))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _run(self, seq: int, query: str) -> None:
        try:
            if self._fetch_is_async:
                results = await self._fetch(query)
            else:
                results = await asyncio.to_thread(self._fetch, query)
        except Exception:
            logger.warning("Destination search for %r failed", query, exc_info=True)
            results = []

        if seq != self._latest_seq:
            logger.debug("Discarding stale suggestions #%d for %r", seq, query)
            return
        self.is_loading = False
        self._set_suggestions(list(results or []))

    def _set_suggestions(self, suggestions: list[str]) -> None:
        self.suggestions = suggestions
        if self._on_update is not None:
            self._on_update(list(suggestions))

    # ── Lifecycle ─────────────────────────────────────────────────────

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    @property
    def is_idle(self) -> bool:
        return self._timer is None and not self._inflight

    async def wait_idle(self) -> None:
        """Wait until no debounce timer is armed and no request is in flight."""
        loop = asyncio.get_running_loop()
        while not self.is_idle:
            if self._inflight:
                await asyncio.gather(*list(self._inflight), return_exceptions=True)
            elif self._timer is not None:
                await asyncio.sleep(max(0.0, self._timer.when() - loop.time()))

    async def aclose(self) -> None:
        self._cancel_timer()
        for task in list(self._inflight):
            task.cancel()
        if self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)
