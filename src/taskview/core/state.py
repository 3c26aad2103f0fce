# src/taskview/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..tasks.task_models import Task, TaskDraft
from .ports import TaskApi

if TYPE_CHECKING:
    from .controller import TaskViewController


@dataclass(slots=True)
class FormState:
    """Values typed into the add-task form. Free-form strings until submitted."""

    title: str = ""
    description: str = ""
    due_date: str = ""
    priority: str = ""

    def set_field(self, name: str, value: str) -> None:
        """Update one field by its wire name (title/description/dueDate/priority)."""
        if name == "dueDate":
            self.due_date = value
        elif name in ("title", "description", "priority"):
            setattr(self, name, value)
        else:
            raise KeyError(name)

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.due_date = ""
        self.priority = ""

    def to_draft(self) -> TaskDraft:
        return TaskDraft(
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            priority=self.priority,
        )


@dataclass(slots=True)
class ViewState:
    tasks: list[Task] = field(default_factory=list)
    loading: bool = False
    error: str | None = None

    # Delete is two-phase: request -> confirm/cancel.
    pending_delete: str | None = None

    # Task ids whose completion toggle is still in flight.
    toggling: set[str] = field(default_factory=set)


@dataclass
class AppState:
    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: object

    api: TaskApi
    controller: TaskViewController

    # ANSI colours for priority/status cells in the console table.
    color: bool = False
