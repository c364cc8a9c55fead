"""Input parser.

Turns ``<key>,<space separated sorted integers>`` lines into SearchRequests.
A line with the wrong shape is reported and skipped; a token that is not an
integer aborts the whole parse.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import (
    InputNotFoundError,
    InputReadError,
    LineFormatError,
    ValueFormatError,
)
from ..core.types import SearchRequest

logger = logging.getLogger(__name__)


def _to_int(token: str, line_number: int | None) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueFormatError(token, line_number) from None


def parse_line(line: str, line_number: int | None = None) -> SearchRequest | None:
    """Parse one record.

    Returns None for a blank line.

    Raises:
        LineFormatError: No comma separates the key from the values
        ValueFormatError: The key or a value is not an integer
    """
    line = line.strip()
    if not line:
        return None

    # Only the first comma separates the key from the values
    parts = line.split(",", 1)
    if len(parts) != 2:
        raise LineFormatError(line, line_number)

    key = _to_int(parts[0].strip(), line_number)
    # split() with no argument drops empty tokens, so "5," is an empty sequence
    sequence = tuple(_to_int(tok, line_number) for tok in parts[1].split())

    return SearchRequest(key=key, sequence=sequence, line_number=line_number)


def parse_lines(lines: Iterable[str], source: str = "<input>") -> list[SearchRequest]:
    """Parse records in order, skipping blank and malformed lines.

    Raises:
        ValueFormatError: On the first non-integer token; nothing parsed
            before it is returned
    """
    requests: list[SearchRequest] = []
    for line_number, line in enumerate(lines, start=1):
        try:
            request = parse_line(line, line_number)
        except LineFormatError as e:
            logger.warning(f"Error: {e}")
            continue
        if request is not None:
            requests.append(request)

    logger.debug(f"Parsed {len(requests)} request(s) from {source}")
    return requests


def read_requests(path: str | Path, encoding: str = "utf-8") -> list[SearchRequest]:
    """Parse every record in the file at `path`.

    Raises:
        InputNotFoundError: `path` does not exist or is a directory
        InputReadError: `path` cannot be read or is not valid text
        ValueFormatError: See `parse_lines`
    """
    path = Path(path)
    try:
        with path.open("r", encoding=encoding) as f:
            return parse_lines(f, source=str(path))
    except (FileNotFoundError, IsADirectoryError):
        raise InputNotFoundError(path) from None
    except OSError as e:
        raise InputReadError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise InputReadError(path, f"not valid {encoding} text ({e.reason})") from e


def parse_file(path: str | Path, encoding: str = "utf-8") -> list[SearchRequest]:
    """Like `read_requests`, but reports fatal errors and returns [] instead."""
    try:
        return read_requests(path, encoding=encoding)
    except (ValueFormatError, InputNotFoundError, InputReadError) as e:
        logger.error(f"Error: {e}")
        return []
