#!/usr/bin/env python3
"""Settings loader for pseudoword."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "PSEUDOWORD_CONFIG"


def config_path() -> Path:
    """Path of the active settings file (env override, else bundled)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(os.path.expanduser(override))
    return APP_CONFIG_PATH


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


__all__ = [
    "load_app_config",
    "get_setting",
    "config_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
