"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from sentiscope.config import PROJECT_ROOT, configure_logging, load_config


def test_repository_config_loads() -> None:
    cfg = load_config()

    assert (PROJECT_ROOT / "configs").exists()
    assert cfg["history"]["max_records"] == 100
    assert {p["name"] for p in cfg["providers"]} == {"meaningcloud", "huggingface", "twinword"}


def test_missing_config(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_config_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


def test_empty_config_is_empty_mapping(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == {}


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging({"logging": {"level": "chatty"}})
    configure_logging({"logging": {"level": "debug"}})
