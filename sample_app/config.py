"""Runtime configuration helpers."""
from __future__ import annotations

import datetime as dt
import os
import time
from dataclasses import dataclass, field
from functools import lru_cache


LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")
_LOG_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}


class SettingsError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def _utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    version: str = "v1.0.0"
    environment: str = "development"
    app_env: str = "development"
    log_level: str = "info"
    start_time: dt.datetime = field(default_factory=_utc_now)
    started_monotonic: float = field(default_factory=time.monotonic)

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


def get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as exc:
        raise SettingsError(f"PORT must be an integer, got {raw!r}") from exc
    if not 1 <= port <= 65535:
        raise SettingsError(f"PORT must be between 1 and 65535, got {port}")
    return port


def _parse_log_level(raw: str) -> str:
    level = raw.strip().lower()
    level = _LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        raise SettingsError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def load_settings() -> Settings:
    """Build settings from environment variables with sensible defaults."""
    return Settings(
        port=_parse_port(get_env("PORT", "3000")),
        version=get_env("APP_VERSION", "v1.0.0"),
        environment=get_env("ENVIRONMENT", "development"),
        app_env=get_env("APP_ENV", "development"),
        log_level=_parse_log_level(get_env("LOG_LEVEL", "info")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return load_settings()
