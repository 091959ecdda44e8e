"""YAML configuration loading and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = Path("configs") / "config.yaml"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_path(path: Path | str) -> Path:
    path = Path(path)
    if path.is_absolute():
        return path
    return PROJECT_ROOT / path


def load_config(cfg_path: Path | str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    path = resolve_path(cfg_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        cfg = yaml.safe_load(handle) or {}
    if not isinstance(cfg, dict):
        raise ValueError("Configuration file must be a mapping.")
    return cfg


def configure_logging(cfg: Dict[str, Any] | None = None) -> None:
    """Apply the ``logging.level`` setting to the root logger."""
    level_name = str(((cfg or {}).get("logging") or {}).get("level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
