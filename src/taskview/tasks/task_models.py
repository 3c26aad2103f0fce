# src/taskview/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    """
    Priorities the task API accepts.

    Tasks coming back from the server keep their priority as a plain string,
    so values outside this set survive a round-trip untouched.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def parse(cls, raw: str | None) -> Priority | None:
        if not raw:
            return None
        s = raw.strip().lower()
        for p in cls:
            if p.value.lower() == s:
                return p
        return None


def parse_due_date(raw: str | None) -> date | None:
    """
    Parse a wire due date.

    Accepts plain ISO dates ("2025-01-05") and full timestamps
    ("2025-01-05T00:00:00.000Z"); only the calendar date is kept.
    """
    if not raw:
        return None
    s = str(raw).strip()
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    # Timestamps with a suffix datetime cannot read; the date part must be followed by "T".
    if len(s) > 10 and s[10] == "T":
        try:
            return date.fromisoformat(s[:10])
        except ValueError:
            return None
    return None


@dataclass(slots=True, frozen=True)
class Task:
    id: str
    title: str
    description: str
    due_date: str
    priority: str
    completed: bool = False

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> Task:
        # Document-store backends send "_id"; plain REST backends send "id".
        task_id = raw.get("_id")
        if task_id is None:
            task_id = raw.get("id")
        if task_id is None:
            raise ValueError("task record has no id")
        return cls(
            id=str(task_id),
            title=str(raw.get("title") or ""),
            description=str(raw.get("description") or ""),
            due_date=str(raw.get("dueDate") or ""),
            priority=str(raw.get("priority") or ""),
            completed=bool(raw.get("completed", False)),
        )

    def to_api(self) -> dict[str, Any]:
        """Full-replace body: every writable field, id excluded."""
        return {
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date,
            "priority": self.priority,
            "completed": self.completed,
        }

    @property
    def due(self) -> date | None:
        return parse_due_date(self.due_date)


@dataclass(slots=True, frozen=True)
class TaskDraft:
    """The creatable subset of a Task; the server assigns id and completed."""

    title: str
    description: str
    due_date: str
    priority: str

    def to_api(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date,
            "priority": self.priority,
        }
