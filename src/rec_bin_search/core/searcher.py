"""
RECURSIVE BINARY SEARCH
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .types import NOT_FOUND, Key, SearchRequest, SearchResult

logger = logging.getLogger(__name__)


def search(
    key: Key, sequence: Sequence[int], low: int = 0, high: int | None = None
) -> SearchResult:
    """
    Performs a recursive binary search for `key` within `sequence[low..high]`.
    The slice must be sorted in ascending order. `high` defaults to the last
    index, so a bare call searches the whole sequence.
    Returns the index of `key` in `sequence` if found,
    otherwise returns -1.
    """
    if high is None:
        high = len(sequence) - 1

    # Exhausted the search space, no match
    if low > high:
        return NOT_FOUND

    # NOTE: unlike slicing, passing bounds keeps indices in the coordinate
    # system of the whole sequence, so no offset adjustment is needed
    mid = low + (high - low) // 2

    if sequence[mid] == key:
        return mid
    if sequence[mid] < key:
        return search(key, sequence, mid + 1, high)
    return search(key, sequence, low, mid - 1)

    # Each call halves the range, so recursion depth is O(log(n))


def search_all(
    keys: Sequence[Key], sequences: Sequence[Sequence[int]]
) -> list[SearchResult]:
    """
    Searches each key in the sequence at the same position.
    results[i] is the index of keys[i] in sequences[i], or -1.
    """
    if len(keys) != len(sequences):
        raise ValueError(
            f"Got {len(keys)} keys for {len(sequences)} sequences; "
            "each key needs exactly one sequence"
        )

    logger.debug(f"Searching {len(keys)} key(s)")
    return [search(k, seq) for k, seq in zip(keys, sequences)]


def search_requests(requests: Iterable[SearchRequest]) -> list[SearchResult]:
    """Runs `search_all` over parsed requests, preserving their order."""
    requests = list(requests)
    return search_all(
        [r.key for r in requests], [r.sequence for r in requests]
    )
