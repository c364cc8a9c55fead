"""Unit tests for SearchConfig and TOML loading."""

from pathlib import Path

import pytest

from rec_bin_search.core.config import SearchConfig, load_config


def test_defaults():
    config = SearchConfig()
    assert config.input_path == Path("input.txt")
    assert config.output_path == Path("output.txt")
    assert config.encoding == "utf-8"


def test_paths_are_coerced():
    config = SearchConfig(input_path="in.txt", output_path="out.txt")
    assert config.input_path == Path("in.txt")
    assert config.output_path == Path("out.txt")


def test_from_dict_rejects_unknown_options():
    with pytest.raises(ValueError, match="input_file"):
        SearchConfig.from_dict({"input_file": "in.txt"})


def test_from_dict_accepts_camel_case_paths():
    config = SearchConfig.from_dict({"inputPath": "in.txt", "outputPath": "out.txt"})
    assert config.input_path == Path("in.txt")
    assert config.output_path == Path("out.txt")


def test_load_config_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[rec_bin_search]\ninput_path = "data/in.txt"\noutput_path = "data/out.txt"\n',
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.input_path == Path("data/in.txt")
    assert config.output_path == Path("data/out.txt")


def test_load_config_top_level(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('input_path = "records.txt"\n', encoding="utf-8")

    config = load_config(path)

    assert config.input_path == Path("records.txt")
    assert config.output_path == Path("output.txt")


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml")
