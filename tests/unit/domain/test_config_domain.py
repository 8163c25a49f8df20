from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Layering of a JSON config file over defaults.
3. Resilience against missing and corrupted config files.
"""

import json
import logging
from pathlib import Path

import pytest

from assetlife.domain.config import CONFIG_KEYS, get_default_config, load_config
from assetlife.domain.constants import CURRENT_CONFIG_VERSION


def test_default_config_has_every_key() -> None:
    cfg = get_default_config()
    assert tuple(cfg) == CONFIG_KEYS
    assert cfg["log_level"] == "INFO"


def test_default_config_returns_fresh_dict() -> None:
    first = get_default_config()
    first["input_path"] = "mutated"
    assert get_default_config()["input_path"] == ""


def test_load_without_file_returns_defaults() -> None:
    assert load_config() == get_default_config()
    assert load_config("") == get_default_config()


def test_load_layers_known_keys(tmp_path: Path) -> None:
    """Known keys override defaults; unknown keys are ignored."""
    path = tmp_path / "assetlife.json"
    path.write_text(json.dumps({
        "version": CURRENT_CONFIG_VERSION,
        "input_path": "public",
        "package_name": "assets",
        "theme": "dark",
    }), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["input_path"] == "public"
    assert cfg["package_name"] == "assets"
    assert cfg["output_path"] == ""
    assert "theme" not in cfg
    assert "version" not in cfg


def test_load_missing_file_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="assetlife.domain.config"):
        cfg = load_config(str(tmp_path / "nope.json"))

    assert cfg == get_default_config()
    assert "not found" in caplog.text


def test_load_corrupted_json_returns_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="assetlife.domain.config"):
        cfg = load_config(str(path))

    assert cfg == get_default_config()
    assert "Failed to load config" in caplog.text


def test_load_non_object_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_config(str(path)) == get_default_config()
