from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.diffs import ConvergenceMonitor
from .errors import ConfigError


class MonitorConfig(BaseModel):
    """Window settings for a convergence monitor."""

    capacity: int = Field(5, ge=1, description="Number of trailing differences kept")
    default: float = Field(
        math.inf, description="Reported maximum while the window is still filling"
    )
    tolerance: float = Field(1e-9, gt=0, description="Converged when max diff < this")

    def build(self) -> ConvergenceMonitor:
        return ConvergenceMonitor(self.capacity, self.default)


class RuntimeConfig(BaseModel):
    monitor: MonitorConfig = Field(default_factory=MonitorConfig)
    verbose: int = Field(0, ge=0)


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ITERMON_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    LOG_LEVEL: str = "INFO"
    CONFIG_PATH: Optional[Path] = None


class AppConfig(BaseModel):
    env: EnvSettings
    runtime: RuntimeConfig

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        runtime = RuntimeConfig()
        if config_path is None:
            config_path = env.CONFIG_PATH
        if config_path is None:
            default_path = Path("itermon.yaml")
            config_path = default_path if default_path.exists() else None

        if config_path is not None:
            if not Path(config_path).exists():
                raise ConfigError(f"Config file not found: {config_path}")
            with open(config_path, "r", encoding="utf-8") as fh:
                try:
                    raw = yaml.safe_load(fh) or {}
                except yaml.YAMLError as ye:
                    raise ConfigError(f"Invalid YAML in {config_path}: {ye}") from ye
            try:
                runtime = RuntimeConfig(**raw)
            except (ValidationError, TypeError) as ve:
                raise ConfigError(f"Invalid {config_path}: {ve}") from ve

        return AppConfig(env=env, runtime=runtime)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load(config_path)
