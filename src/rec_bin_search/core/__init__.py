"""Search core: types, errors, configuration and the searcher."""

from .searcher import search, search_all, search_requests

__all__ = ["search", "search_all", "search_requests"]
