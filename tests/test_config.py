"""Config layering: defaults <- config.yaml <- env."""
from __future__ import annotations

import pytest

from number_mixers import config


@pytest.fixture(autouse=True)
def _no_yaml_or_env(monkeypatch, tmp_path):
    for name in (
        "NUMBER_MIXERS_REPORT_PATH",
        "NUMBER_MIXERS_SEED",
        "NUMBER_MIXERS_RUN_KEY",
        "NUMBER_MIXERS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_config_yaml_path", lambda: tmp_path / "missing.yaml")


def test_defaults():
    assert config.report_path() == "log.txt"
    assert config.seed() is None
    assert config.run_key() is None
    assert config.log_level() == "WARNING"


def test_yaml_overrides_defaults(monkeypatch, tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("report:\n  path: out/report.txt\nrandom:\n  seed: 11\n", encoding="utf-8")
    monkeypatch.setattr(config, "_config_yaml_path", lambda: p)
    assert config.report_path() == "out/report.txt"
    assert config.seed() == 11
    assert config.log_level() == "WARNING"


def test_env_overrides_yaml(monkeypatch, tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("random:\n  seed: 11\n", encoding="utf-8")
    monkeypatch.setattr(config, "_config_yaml_path", lambda: p)
    monkeypatch.setenv("NUMBER_MIXERS_SEED", "99")
    monkeypatch.setenv("NUMBER_MIXERS_REPORT_PATH", "env.txt")
    monkeypatch.setenv("NUMBER_MIXERS_RUN_KEY", "rk-env")
    monkeypatch.setenv("NUMBER_MIXERS_LOG_LEVEL", "debug")
    assert config.seed() == 99
    assert config.report_path() == "env.txt"
    assert config.run_key() == "rk-env"
    assert config.log_level() == "DEBUG"


def test_non_mapping_yaml_ignored(monkeypatch, tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setattr(config, "_config_yaml_path", lambda: p)
    assert config.report_path() == "log.txt"


def test_non_integer_seed_env_rejected(monkeypatch):
    monkeypatch.setenv("NUMBER_MIXERS_SEED", "abc")
    with pytest.raises(ValueError, match="NUMBER_MIXERS_SEED must be an integer"):
        config.seed()
