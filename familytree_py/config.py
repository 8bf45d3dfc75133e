"""Simple configuration loader for familytree_py.

Behavior:
- Load defaults.
- If environment variable `FAMILYTREE_CONFIG` is set, load that JSON file and merge.
- Environment variables override file values (variables: FAMILYTREE_LOG_LEVEL,
  FAMILYTREE_MAX_PATH_DEPTH, FAMILYTREE_MAX_PATHS).

`max_path_depth` bounds the generic path search (None = until the graph is
exhausted); `max_paths` caps `all_shortest_paths`.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os
import json
import logging
from typing import Optional


@dataclass
class Config:
    log_level: str = "INFO"
    max_path_depth: Optional[int] = None
    max_paths: int = 100


def _load_json_file(path: Path) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        logging.warning("could not read config file %s", path)
        return None


def _int_setting(name: str, value, default: Optional[int], allow_none: bool = False) -> Optional[int]:
    """Parse an integer setting; a bad value logs a warning and keeps ``default``."""
    if allow_none and (value is None or value == ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logging.warning("invalid value %r for %s, keeping %r", value, name, default)
        return default


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from (1) defaults, (2) JSON file, (3) env vars.

    :param config_path: optional path to a JSON config file. If not provided
                        will use environment variable `FAMILYTREE_CONFIG` if set.
    """
    cfg = Config()

    cp = config_path or os.environ.get("FAMILYTREE_CONFIG")
    if cp:
        data = _load_json_file(Path(cp))
        if isinstance(data, dict):
            if data.get("log_level"):
                cfg.log_level = str(data["log_level"]).upper()
            if "max_path_depth" in data:
                cfg.max_path_depth = _int_setting("max_path_depth", data["max_path_depth"], cfg.max_path_depth, allow_none=True)
            if data.get("max_paths"):
                cfg.max_paths = _int_setting("max_paths", data["max_paths"], cfg.max_paths)

    # an explicit config_path is authoritative: env vars only apply without one
    if config_path is None:
        if os.environ.get("FAMILYTREE_LOG_LEVEL"):
            cfg.log_level = os.environ["FAMILYTREE_LOG_LEVEL"].upper()
        if os.environ.get("FAMILYTREE_MAX_PATH_DEPTH"):
            cfg.max_path_depth = _int_setting(
                "FAMILYTREE_MAX_PATH_DEPTH", os.environ["FAMILYTREE_MAX_PATH_DEPTH"], cfg.max_path_depth, allow_none=True
            )
        if os.environ.get("FAMILYTREE_MAX_PATHS"):
            cfg.max_paths = _int_setting("FAMILYTREE_MAX_PATHS", os.environ["FAMILYTREE_MAX_PATHS"], cfg.max_paths)

    return cfg
