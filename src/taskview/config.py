# src/taskview/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No network access or secrets required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKVIEW"

DEFAULT_API_BASE_URL = "http://localhost:8000/api"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally (values already in the environment win)."""
    from dotenv import load_dotenv

    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


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


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Remote task API ----
    api_base_url: str
    connect_timeout: float
    read_timeout: float

    # ---- Console ----
    color: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskview") or "taskview"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        # VITE_API_BASE_URL is honoured so a frontend .env can be shared as-is.
        api_base_url = _first_env(
            _k("API_BASE_URL"), "VITE_API_BASE_URL", default=DEFAULT_API_BASE_URL
        ) or DEFAULT_API_BASE_URL
        api_base_url = api_base_url.strip().rstrip("/")

        connect_timeout = _env_float(_k("CONNECT_TIMEOUT_SECONDS"), 5.0)
        read_timeout = _env_float(_k("READ_TIMEOUT_SECONDS"), 15.0)

        color = _env_bool(_k("COLOR"), True) and os.getenv("NO_COLOR") is None

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskview"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            api_base_url=api_base_url,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            color=color,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
