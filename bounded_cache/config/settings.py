"""Configuration models for the bounded cache."""

from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import BaseModel, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "DEFAULT_LIMIT",
    "CacheConfig",
    "MonitoringConfig",
    "CacheSettings",
    "configure_logging",
    "get_settings",
]

DEFAULT_LIMIT = 10_000


class CacheConfig(BaseModel):
    """Capacity and payload options, fixed for the lifetime of a cache."""

    limit: PositiveInt = DEFAULT_LIMIT
    serialize: bool = False

    model_config = {"frozen": True, "extra": "forbid"}


class MonitoringConfig(BaseModel):
    """Metrics and logging configuration."""

    enable_metrics: bool = True
    log_level: str = "INFO"

    model_config = {"frozen": True}

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class CacheSettings(BaseSettings):
    """Aggregate all configuration sections."""

    profile: str = "production"
    cache: CacheConfig = CacheConfig()
    monitoring: MonitoringConfig = MonitoringConfig()

    model_config = SettingsConfigDict(env_prefix="BOUNDED_CACHE_", env_nested_delimiter="__")

    @classmethod
    def for_testing(cls) -> "CacheSettings":
        return cls(
            profile="testing",
            cache=CacheConfig(limit=100),
            monitoring=MonitoringConfig(enable_metrics=False, log_level="DEBUG"),
        )

    @classmethod
    def for_development(cls) -> "CacheSettings":
        return cls(
            profile="development",
            monitoring=MonitoringConfig(log_level="DEBUG"),
        )

    def get_config_summary(self) -> dict[str, Any]:
        return {
            "profile": self.profile,
            "cache": self.cache.model_dump(),
            "monitoring": self.monitoring.model_dump(),
        }


def configure_logging(settings: CacheSettings | None = None) -> None:
    """Configure basic console logging for a host application."""

    settings = settings or CacheSettings()

    level = getattr(logging, settings.monitoring.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def get_settings(env: str | None = None) -> CacheSettings:
    env = env or os.getenv("BOUNDED_CACHE_ENV", "production")
    if env == "testing":
        return CacheSettings.for_testing()
    if env == "development":
        return CacheSettings.for_development()
    return CacheSettings()
