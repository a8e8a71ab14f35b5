"""Tests for engine configuration"""
from pathlib import Path

import pytest
import yaml

from last_interview.constants import DEFAULT_CONTENT
from last_interview.schemas.config import EngineConfig

ENV_VARS = [
    "LAST_INTERVIEW_CONTENT",
    "LAST_INTERVIEW_LOG_LEVEL",
    "LAST_INTERVIEW_SEED",
    "LAST_INTERVIEW_INTERRUPTION_CHANCE",
    "LAST_INTERVIEW_META_INTERVAL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        # setenv first so monkeypatch also undoes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults():
    config = EngineConfig()
    assert config.content_path == DEFAULT_CONTENT
    assert config.log_level == "info"
    assert config.seed is None
    assert config.meta_interval == 0


def test_log_level_normalized():
    assert EngineConfig(log_level="DEBUG").log_level == "debug"


@pytest.mark.parametrize("kwargs", [
    {"log_level": "verbose"},
    {"interruption_chance": 1.5},
    {"interruption_chance": -0.1},
    {"meta_interval": -1},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)


def test_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({
        "content_path": "custom.yaml",
        "seed": 3,
        "interruption_chance": 0.0,
    }), encoding="utf-8")

    config = EngineConfig.from_yaml(str(path))
    assert config.content_path == Path("custom.yaml")
    assert config.seed == 3
    assert config.interruption_chance == 0.0


def test_from_env(clean_env, monkeypatch):
    monkeypatch.setenv("LAST_INTERVIEW_SEED", "11")
    monkeypatch.setenv("LAST_INTERVIEW_LOG_LEVEL", "warning")
    monkeypatch.setenv("LAST_INTERVIEW_META_INTERVAL", "4")

    config = EngineConfig.from_env()
    assert config.seed == 11
    assert config.log_level == "warning"
    assert config.meta_interval == 4
    assert config.content_path == DEFAULT_CONTENT


def test_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / "interview.env"
    env_file.write_text("LAST_INTERVIEW_INTERRUPTION_CHANCE=0.75\n", encoding="utf-8")

    config = EngineConfig.from_env(str(env_file))
    assert config.interruption_chance == 0.75
