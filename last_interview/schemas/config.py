"""Engine configuration"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from last_interview.constants import (
    DEFAULT_CONTENT,
    DEFAULT_INTERRUPTION_CHANCE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_META_INTERVAL,
    ENV_CONTENT,
    ENV_INTERRUPTION_CHANCE,
    ENV_LOG_LEVEL,
    ENV_META_INTERVAL,
    ENV_SEED,
)

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class EngineConfig:
    """Configuration for a playthrough or simulation"""
    content_path: Path = DEFAULT_CONTENT
    log_level: str = DEFAULT_LOG_LEVEL
    seed: Optional[int] = None  # Seed for players and office flavor, None for nondeterministic
    interruption_chance: float = DEFAULT_INTERRUPTION_CHANCE
    meta_interval: int = DEFAULT_META_INTERVAL  # Non-meta answers required before a meta question

    def __post_init__(self):
        self.content_path = Path(self.content_path)
        self.log_level = self.log_level.lower()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}. Supported levels: {LOG_LEVELS}")
        if not (0.0 <= self.interruption_chance <= 1.0):
            raise ValueError(
                f"Interruption chance must be between 0.0 and 1.0, got {self.interruption_chance}")
        if self.meta_interval < 0:
            raise ValueError(f"Meta interval must not be negative, got {self.meta_interval}")

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'EngineConfig':
        """Create config from YAML file"""
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'EngineConfig':
        """Create config from environment variables, loading a .env file first if present"""
        load_dotenv(env_file)
        kwargs = {}
        if os.getenv(ENV_CONTENT):
            kwargs['content_path'] = Path(os.environ[ENV_CONTENT])
        if os.getenv(ENV_LOG_LEVEL):
            kwargs['log_level'] = os.environ[ENV_LOG_LEVEL]
        if os.getenv(ENV_SEED):
            kwargs['seed'] = int(os.environ[ENV_SEED])
        if os.getenv(ENV_INTERRUPTION_CHANCE):
            kwargs['interruption_chance'] = float(os.environ[ENV_INTERRUPTION_CHANCE])
        if os.getenv(ENV_META_INTERVAL):
            kwargs['meta_interval'] = int(os.environ[ENV_META_INTERVAL])
        return cls(**kwargs)
