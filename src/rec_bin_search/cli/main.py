# Minimal CLI using argparse that searches every record of an input file and writes the results.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rec_bin_search.core.config import (
    DEFAULT_INPUT,
    DEFAULT_OUTPUT,
    SearchConfig,
    load_config,
)
from rec_bin_search.pipeline import run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rec-bin-search",
        description="Binary search each '<key>,<sorted integers>' line of a file",
    )
    # Defaults are None so that only values given explicitly override --config
    p.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help=f"Input file (default: {DEFAULT_INPUT})",
    )
    p.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help=f"Output file (default: {DEFAULT_OUTPUT})",
    )
    p.add_argument("--config", type=Path, help="TOML config file (optional)")
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    p.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return p


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Send log records to stdout, and optionally to a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=handlers,
        force=True,
    )


def resolve_config(args: argparse.Namespace) -> SearchConfig:
    config = load_config(args.config) if args.config else SearchConfig()
    if args.input is not None:
        config.input_path = args.input
    if args.output is not None:
        config.output_path = args.output
    return config


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.verbose, args.log_file)
    except OSError as e:
        print(f"Error opening log file: {e}")
        return 2

    try:
        config = resolve_config(args)
    except Exception as e:
        print(f"Error loading config: {e}")
        return 2

    # Parse and write failures are reported by the pipeline and are not exit errors
    run(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
