"""modules/search: Debounced destination autocomplete."""

from modules.search.destination_search import DestinationSearch

__all__ = ["DestinationSearch"]
