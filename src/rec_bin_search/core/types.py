"""Common type definitions for the batch binary search.

Defines the values passed between the parser, searcher and writer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Core primitive types
Key = int
Values = tuple[int, ...]
SearchResult = int

# Sentinel result for a key absent from its sequence
NOT_FOUND: SearchResult = -1


@dataclass(frozen=True)
class SearchRequest:
    """A key paired with the sorted sequence it is searched in.

    Attributes:
        key: Value to search for
        sequence: Ascending integers taken from one input line
        line_number: 1-based source line, used only in diagnostics
    """

    key: Key
    sequence: Values
    line_number: int | None = field(default=None, compare=False)
