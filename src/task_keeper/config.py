# src/task_keeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every setting is optional; defaults give the plain interactive task manager.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TASK_KEEPER"

DEFAULT_MONITOR_INTERVAL_SECONDS = 10.0


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Local .env never overrides variables already set in the real environment.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Optional[Path]

    # ---- Overdue monitor ----
    monitor_enabled: bool
    monitor_interval_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-keeper").strip() or "task-keeper"
        # Console stays quiet by default: prompts and notices are the UI.
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_file = _env_path(_k("LOG_FILE"), None)

        monitor_enabled = _env_bool(_k("MONITOR_ENABLED"), True)
        monitor_interval_seconds = _env_float(
            _k("MONITOR_INTERVAL"), DEFAULT_MONITOR_INTERVAL_SECONDS
        )
        if monitor_interval_seconds <= 0:
            monitor_interval_seconds = DEFAULT_MONITOR_INTERVAL_SECONDS

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            monitor_enabled=monitor_enabled,
            monitor_interval_seconds=monitor_interval_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
