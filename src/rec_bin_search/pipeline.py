"""Batch driver: parse, search, write.

Each step runs to completion before the next starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .core.config import SearchConfig
from .core.searcher import search_requests
from .core.types import SearchResult
from .io.parser import parse_file
from .io.writer import write_results

logger = logging.getLogger(__name__)


@dataclass
class PipelineOutcome:
    """What a run did.

    Attributes:
        request_count: Records parsed from the input
        results: One result per record, in input order
        written: Whether the output file was written
    """

    request_count: int = 0
    results: list[SearchResult] = field(default_factory=list)
    written: bool = False


def run(config: SearchConfig) -> PipelineOutcome:
    """Run one batch described by `config`.

    Nothing is written when the input yields no records, including when
    parsing failed.
    """
    requests = parse_file(config.input_path, encoding=config.encoding)
    if not requests:
        logger.debug(f"No records parsed from {config.input_path}; nothing to write")
        return PipelineOutcome()

    results = search_requests(requests)
    written = write_results(results, config.output_path, encoding=config.encoding)

    return PipelineOutcome(
        request_count=len(requests), results=results, written=written
    )
