# tests/fakes.py

from __future__ import annotations

import asyncio
import itertools
from dataclasses import replace

from taskview.tasks.task_api import (
    CREATE_FAILED,
    DELETE_FAILED,
    FETCH_FAILED,
    UPDATE_FAILED,
    TaskApiError,
)
from taskview.tasks.task_models import Task, TaskDraft


class FakeTaskApi:
    """
    In-memory TaskApi used for controller tests.

    - Keeps tasks in insertion order (the controller is expected to sort them)
    - Records every call as (method, arg) for assertions
    - `fail` holds method names that should raise TaskApiError
    - `echo_created = False` makes create_task answer without a record
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.tasks: dict[str, Task] = {t.id: t for t in tasks or []}
        self.calls: list[tuple[str, object]] = []
        self.fail: set[str] = set()
        self.echo_created = True
        self._ids = itertools.count(1)

    async def list_tasks(self) -> list[Task]:
        self.calls.append(("list", None))
        if "list" in self.fail:
            raise TaskApiError(FETCH_FAILED)
        return list(self.tasks.values())

    async def create_task(self, draft: TaskDraft) -> Task | None:
        self.calls.append(("create", draft))
        if "create" in self.fail:
            raise TaskApiError(CREATE_FAILED)
        task = Task(
            id=f"t{next(self._ids)}",
            title=draft.title,
            description=draft.description,
            due_date=draft.due_date,
            priority=draft.priority,
            completed=False,
        )
        self.tasks[task.id] = task
        return task if self.echo_created else None

    async def replace_task(self, task_id: str, task: Task) -> Task:
        self.calls.append(("replace", (task_id, task)))
        if "replace" in self.fail or task_id not in self.tasks:
            raise TaskApiError(UPDATE_FAILED)
        self.tasks[task_id] = replace(task, id=task_id)
        return self.tasks[task_id]

    async def delete_task(self, task_id: str) -> None:
        self.calls.append(("delete", task_id))
        if "delete" in self.fail or task_id not in self.tasks:
            raise TaskApiError(DELETE_FAILED)
        del self.tasks[task_id]

    def count(self, method: str) -> int:
        return sum(1 for m, _ in self.calls if m == method)


class GatedListApi(FakeTaskApi):
    """
    FakeTaskApi whose list_tasks() calls block until released one by one.

    Lets a test finish list fetches in a chosen order to simulate overlapping
    refreshes.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        super().__init__(tasks)
        self.gates: list[asyncio.Event] = []
        self.snapshots: list[list[Task]] = []

    async def list_tasks(self) -> list[Task]:
        self.calls.append(("list", None))
        snapshot = list(self.tasks.values())
        gate = asyncio.Event()
        self.gates.append(gate)
        self.snapshots.append(snapshot)
        await gate.wait()
        return snapshot
