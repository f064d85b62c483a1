import asyncio

import pytest

from modules.search.destination_search import DestinationSearch

DEBOUNCE = 0.05


class RecordingFetch:
    """Async fetch that records every query it receives."""

    def __init__(self, results=None):
        self.calls = []
        self.results = results or {}

    async def __call__(self, query):
        self.calls.append(query)
        return self.results.get(query, [f"{query} (result)"])


def test_debounce_issues_single_request_for_last_query():
    fetch = RecordingFetch({"Paris": ["Paris, France", "Paris, Texas, United States"]})

    async def scenario():
        search = DestinationSearch(fetch=fetch, debounce_seconds=DEBOUNCE)
        for query in ("Par", "Pari", "Paris"):
            search.on_input(query)
            await asyncio.sleep(DEBOUNCE / 5)
        await search.wait_idle()
        return search

    search = asyncio.run(scenario())
    assert fetch.calls == ["Paris"]
    assert search.suggestions == ["Paris, France", "Paris, Texas, United States"]
    assert search.visible
    assert not search.is_loading


def test_pause_between_keystrokes_issues_each_request():
    fetch = RecordingFetch()

    async def scenario():
        search = DestinationSearch(fetch=fetch, debounce_seconds=DEBOUNCE)
        search.on_input("Ro")
        await search.wait_idle()
        search.on_input("Rome")
        await search.wait_idle()

    asyncio.run(scenario())
    assert fetch.calls == ["Ro", "Rome"]


def test_stale_response_does_not_clobber_newer_one():
    async def scenario():
        release_lon = asyncio.Event()

        async def fetch(query):
            if query == "Lon":
                await release_lon.wait()
                return ["Lonavala, India"]
            return ["London, England, United Kingdom"]

        search = DestinationSearch(fetch=fetch, debounce_seconds=DEBOUNCE / 5)
        search.on_input("Lon")
        await asyncio.sleep(DEBOUNCE)          # "Lon" issued, still pending
        search.on_input("London")
        await asyncio.sleep(DEBOUNCE)          # "London" issued and applied
        applied_first = list(search.suggestions)

        release_lon.set()                      # late answer for the older query
        await search.wait_idle()
        return applied_first, search.suggestions

    applied_first, final = asyncio.run(scenario())
    assert applied_first == ["London, England, United Kingdom"]
    assert final == ["London, England, United Kingdom"]


def test_short_query_clears_without_request():
    fetch = RecordingFetch()

    async def scenario():
        search = DestinationSearch(fetch=fetch, debounce_seconds=DEBOUNCE)
        search.on_input("Berlin")
        await search.wait_idle()
        search.on_input("B")
        await search.wait_idle()
        return search

    search = asyncio.run(scenario())
    assert fetch.calls == ["Berlin"]
    assert search.suggestions == []
    assert not search.visible


def test_short_query_cancels_pending_timer():
    fetch = RecordingFetch()

    async def scenario():
        search = DestinationSearch(fetch=fetch, debounce_seconds=DEBOUNCE)
        search.on_input("Be")
        search.on_input("")
        await asyncio.sleep(DEBOUNCE * 2)
        return search

    search = asyncio.run(scenario())
    assert fetch.calls == []
    assert search.is_idle


def test_fetch_failure_resolves_to_empty_list():
    async def failing(query):
        raise ConnectionError("network down")

    async def scenario():
        search = DestinationSearch(fetch=failing, debounce_seconds=0)
        search.on_input("Tokyo")
        await search.wait_idle()
        return search

    search = asyncio.run(scenario())
    assert search.suggestions == []
    assert not search.is_loading


def test_blocking_fetch_runs_off_the_loop():
    seen = []

    def blocking(query):
        seen.append(query)
        return ["Seattle, Washington, United States"]

    async def scenario():
        search = DestinationSearch(fetch=blocking, debounce_seconds=0)
        search.on_input("Sea")
        await search.wait_idle()
        return search

    search = asyncio.run(scenario())
    assert seen == ["Sea"]
    assert search.suggestions == ["Seattle, Washington, United States"]


def test_on_update_callback_receives_suggestions():
    updates = []

    async def scenario():
        search = DestinationSearch(fetch=RecordingFetch(), debounce_seconds=0, on_update=updates.append)
        search.on_input("Oslo")
        await search.wait_idle()

    asyncio.run(scenario())
    assert updates == [["Oslo (result)"]]


def test_select_hides_dropdown():
    async def scenario():
        search = DestinationSearch(fetch=RecordingFetch(), debounce_seconds=DEBOUNCE)
        search.on_input("Lis")
        await search.wait_idle()
        chosen = search.select("Lisbon, Portugal")
        return search, chosen

    search, chosen = asyncio.run(scenario())
    assert chosen == "Lisbon, Portugal"
    assert not search.visible


def test_select_discards_response_still_in_flight():
    updates = []

    async def scenario():
        release = asyncio.Event()

        async def fetch(query):
            await release.wait()
            return ["Lisbon, Portugal", "Lisburn, UK"]

        search = DestinationSearch(fetch=fetch, debounce_seconds=DEBOUNCE, on_update=updates.append)
        search.on_input("Lis")
        await asyncio.sleep(DEBOUNCE * 2)   # request issued, waiting on release
        search.select("Lisbon, Portugal")
        release.set()
        await search.wait_idle()
        return search

    search = asyncio.run(scenario())
    assert search.suggestions == []
    assert updates == []
    assert not search.visible
    assert not search.is_loading


def test_on_input_requires_running_loop():
    search = DestinationSearch(fetch=RecordingFetch())
    with pytest.raises(RuntimeError):
        search.on_input("Paris")


def test_aclose_cancels_pending_work():
    fetch = RecordingFetch()

    async def scenario():
        search = DestinationSearch(fetch=fetch, debounce_seconds=DEBOUNCE)
        search.on_input("Madrid")
        await search.aclose()
        await asyncio.sleep(DEBOUNCE * 2)
        return search

    search = asyncio.run(scenario())
    assert fetch.calls == []
    assert search.is_idle
