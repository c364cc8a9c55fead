"""Exception hierarchy for the batch binary search.

Line shape problems are recoverable; everything else stops its step.
"""

from __future__ import annotations

from pathlib import Path


class SearchError(Exception):
    """Base exception for all batch search errors."""
    pass


class LineFormatError(SearchError):
    """Raised when a line is not of the form ``<key>,<values>``."""

    def __init__(self, line: str, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        super().__init__(f"Invalid line format: {line}")


class ValueFormatError(SearchError, ValueError):
    """Raised when a key or sequence token is not an integer."""

    def __init__(self, token: str, line_number: int | None = None):
        self.token = token
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            f"File contained a non-integer value or was malformed: {token!r}{where}"
        )


class InputNotFoundError(SearchError, FileNotFoundError):
    """Raised when the input file does not exist."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(
            f"The file {self.path} was not found. Please ensure it exists."
        )


class WriteError(SearchError, OSError):
    """Raised when the results file cannot be written."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        msg = f"Error writing to file: {self.path}"
        super().__init__(f"{msg} ({reason})" if reason else msg)


class InputReadError(SearchError, OSError):
    """Raised when the input file exists but cannot be read or decoded."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        msg = f"The file {self.path} could not be read"
        super().__init__(f"{msg}: {reason}" if reason else f"{msg}.")
