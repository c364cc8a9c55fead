"""Reading requests and writing results."""

from .parser import parse_file, parse_line, parse_lines, read_requests
from .writer import dump_results, write_results

__all__ = [
    "parse_file",
    "parse_line",
    "parse_lines",
    "read_requests",
    "dump_results",
    "write_results",
]
