"""
Load config from config.yaml with optional env overrides.
Single source of truth for the demo report path, random seed and log level.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml

# Defaults if no YAML or env
_DEFAULTS = {
    "report": {
        "path": "log.txt",
    },
    "random": {
        "seed": None,
        "run_key": None,
    },
    "logging": {
        "level": "WARNING",
    },
}


def _config_yaml_path() -> Path:
    """Config.yaml lives at repo root (parent of package dir)."""
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml() -> dict:
    config_path = _config_yaml_path()
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    path = os.environ.get("NUMBER_MIXERS_REPORT_PATH")
    if path:
        overrides.setdefault("report", {})["path"] = path
    seed_env = os.environ.get("NUMBER_MIXERS_SEED")
    if seed_env:
        try:
            overrides.setdefault("random", {})["seed"] = int(seed_env)
        except ValueError:
            raise ValueError(f"NUMBER_MIXERS_SEED must be an integer, got {seed_env!r}") from None
    run_key_env = os.environ.get("NUMBER_MIXERS_RUN_KEY")
    if run_key_env:
        overrides.setdefault("random", {})["run_key"] = run_key_env
    level = os.environ.get("NUMBER_MIXERS_LOG_LEVEL")
    if level:
        overrides.setdefault("logging", {})["level"] = level
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def report_path() -> str:
    return str(get_config()["report"]["path"])


def seed() -> Optional[int]:
    value = get_config()["random"].get("seed")
    return None if value is None else int(value)


def run_key() -> Optional[str]:
    value = get_config()["random"].get("run_key")
    return None if value is None else str(value)


def log_level() -> str:
    return str(get_config()["logging"]["level"]).upper()
