# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskview.cli.bootstrap import create_initial_state
from taskview.core.state import AppState
from taskview.tasks.task_models import Task

from .fakes import FakeTaskApi


def make_task(
    task_id: str,
    *,
    title: str | None = None,
    priority: str = "Medium",
    due: str = "2025-01-10",
    completed: bool = False,
) -> Task:
    return Task(
        id=task_id,
        title=title or f"task {task_id}",
        description=f"description of {task_id}",
        due_date=due,
        priority=priority,
        completed=completed,
    )


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="taskview-test",
        log_level="DEBUG",
        api_base_url="http://tasks.test/api",
        connect_timeout=1.0,
        read_timeout=1.0,
        color=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def api() -> FakeTaskApi:
    return FakeTaskApi(
        [
            make_task("a", priority="Low", due="2025-01-01"),
            make_task("b", priority="High", due="2025-03-01"),
            make_task("c", priority="High", due="2025-02-01"),
        ]
    )


@pytest.fixture()
def state(settings: SimpleNamespace, api: FakeTaskApi) -> AppState:
    """AppState wired with the in-memory API fake."""
    return create_initial_state(settings=settings, api=api)
