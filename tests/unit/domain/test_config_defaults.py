from __future__ import annotations

"""
Unit tests for Configuration Domain Management.

Verifies default values and JSON file loading, including the error
paths raised as ConfigError.
"""

import json
from pathlib import Path

import pytest

from jucer2cmake.domain.config import MODE_REPROJUCER, get_default_config, load_config
from jucer2cmake.domain.errors import ConfigError


def test_default_config_values() -> None:
    cfg = get_default_config()

    assert cfg["mode"] == MODE_REPROJUCER
    assert cfg["output_filename"] == "CMakeLists.txt"
    assert cfg["cmake_minimum_version"] == "3.4"
    assert cfg["include_root_group"] is True
    assert cfg["compiled_extensions"] == [".cpp"]
    assert cfg["header_extension"] == ".h"


def test_default_config_is_a_fresh_copy() -> None:
    cfg = get_default_config()
    cfg["compiled_extensions"].append(".mm")

    assert get_default_config()["compiled_extensions"] == [".cpp"]


def test_load_config_without_path_returns_defaults() -> None:
    assert load_config(None) == get_default_config()


def test_load_config_merges_known_keys(tmp_path: Path) -> None:
    path = tmp_path / "jucer2cmake.json"
    path.write_text(json.dumps({"mode": "juce6", "unknown_key": 1}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["mode"] == "juce6"
    assert "unknown_key" not in cfg
    assert cfg["output_filename"] == "CMakeLists.txt"


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(str(tmp_path / "missing.json"))


def test_load_config_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{ not json", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path))


def test_load_config_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigError, match="JSON object"):
        load_config(str(path))
