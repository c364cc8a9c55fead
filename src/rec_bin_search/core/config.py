"""Configuration for the batch binary search.

The input and output locations used to be fixed names; they are now
explicit settings that can come from a TOML file or the command line.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import tomllib  # Python 3.11+

# Table name looked up in a TOML config file
CONFIG_TABLE = "rec_bin_search"

DEFAULT_INPUT = Path("input.txt")
DEFAULT_OUTPUT = Path("output.txt")

# camelCase spellings accepted for the path options
OPTION_ALIASES = {"inputPath": "input_path", "outputPath": "output_path"}


@dataclass
class SearchConfig:
    """Settings for one batch run.

    Attributes:
        input_path: File holding one ``<key>,<values>`` record per line
        output_path: File the results are written to
        encoding: Text encoding for both files
    """

    input_path: Path = DEFAULT_INPUT
    output_path: Path = DEFAULT_OUTPUT
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "SearchConfig":
        d = {OPTION_ALIASES.get(k, k): v for k, v in d.items()}
        known = {f.name for f in fields(SearchConfig)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown config option(s): {', '.join(unknown)}")
        return SearchConfig(**d)


def load_config(path: Path) -> SearchConfig:
    """Read a SearchConfig from TOML.

    Options may sit under a ``[rec_bin_search]`` table or at the top level.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    section = data.get(CONFIG_TABLE, data)
    return SearchConfig.from_dict(section)
