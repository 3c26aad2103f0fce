# src/taskview/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on this Protocol instead of the concrete httpx client,
so tests can drive it with an in-memory fake.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskDraft


class TaskApi(Protocol):
    """Remote task collection. Every method raises TaskApiError on failure."""

    async def list_tasks(self) -> list[Task]: ...
    async def create_task(self, draft: TaskDraft) -> Task | None: ...
    async def replace_task(self, task_id: str, task: Task) -> Task: ...
    async def delete_task(self, task_id: str) -> None: ...
