# src/taskview/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the HTTP task client and the view controller into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.controller import TaskViewController
from ..core.ports import TaskApi
from ..core.state import AppState
from ..tasks.task_api import TaskApiClient

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, api: TaskApi | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the API injectable makes the app easier to test.
    If settings is None, falls back to get_settings(); if api is None, an
    httpx-backed TaskApiClient is built from settings.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if api is None:
        api = TaskApiClient.from_settings(settings)
        logger.debug("Task API client created for %s", settings.api_base_url)

    return AppState(
        settings=settings,
        api=api,
        controller=TaskViewController(api),
        color=bool(getattr(settings, "color", False)),
    )


async def close_state(state: AppState) -> None:
    """Release the HTTP client, if the API has one."""
    aclose = getattr(state.api, "aclose", None)
    if aclose is None:
        return
    try:
        await aclose()
    except Exception:
        logger.debug("Task API client close failed.", exc_info=True)
