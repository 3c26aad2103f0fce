# src/taskview/tasks/sorting.py

"""
Display order for the task table.

High priority first, then earlier due date first. Tasks without a usable due
date go after the dated ones of the same priority. Python's sort is stable, so
ties keep their input order.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .task_models import Priority, Task

PRIORITY_RANK: dict[str, int] = {
    Priority.HIGH.value: 3,
    Priority.MEDIUM.value: 2,
    Priority.LOW.value: 1,
}


def priority_rank(priority: str | None) -> int:
    """Numeric rank used for ordering; unknown priorities rank 0."""
    if not priority:
        return 0
    return PRIORITY_RANK.get(priority, 0)


def _sort_key(task: Task) -> tuple[int, int, date]:
    due = task.due
    if due is None:
        return (-priority_rank(task.priority), 1, date.max)
    return (-priority_rank(task.priority), 0, due)


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Return a new sorted list; the input is left untouched."""
    return sorted(tasks, key=_sort_key)
