"""rec_bin_search - batch recursive binary search over line-oriented files."""

from .core.config import SearchConfig, load_config
from .core.errors import (
    SearchError,
    LineFormatError,
    ValueFormatError,
    InputNotFoundError,
    InputReadError,
    WriteError,
)
from .core.searcher import search, search_all, search_requests
from .core.types import NOT_FOUND, Key, SearchRequest, SearchResult
from .pipeline import PipelineOutcome, run

__all__ = [
    "SearchConfig",
    "load_config",
    "SearchError",
    "LineFormatError",
    "ValueFormatError",
    "InputNotFoundError",
    "InputReadError",
    "WriteError",
    "search",
    "search_all",
    "search_requests",
    "NOT_FOUND",
    "Key",
    "SearchRequest",
    "SearchResult",
    "PipelineOutcome",
    "run",
]
