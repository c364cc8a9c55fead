"""Results writer.

Writes one decimal result per line using the platform line terminator.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import WriteError
from ..core.types import SearchResult

logger = logging.getLogger(__name__)


def dump_results(
    results: Iterable[SearchResult], path: str | Path, encoding: str = "utf-8"
) -> Path:
    """Write `results` to `path`, replacing any existing file.

    Raises:
        WriteError: The file could not be opened or written
    """
    path = Path(path)
    try:
        # Text mode translates "\n" to os.linesep
        with path.open("w", encoding=encoding) as f:
            for result in results:
                f.write(f"{result}\n")
    except OSError as e:
        raise WriteError(path, e.strerror or str(e)) from e
    return path


def write_results(
    results: Iterable[SearchResult], path: str | Path, encoding: str = "utf-8"
) -> bool:
    """Write `results` and report the outcome. Never raises WriteError.

    Returns True if the file was written.
    """
    try:
        written = dump_results(results, path, encoding=encoding)
    except WriteError as e:
        logger.error(str(e))
        logger.debug(f"Write failure reason: {e.reason}")
        return False

    logger.info(f"Search results written to {written}")
    return True
