# src/taskview/core/render.py

"""
What the task view shows, as plain data.

The console connector turns this into text; tests assert against it directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Priority, parse_due_date
from .state import FormState, ViewState

HEADING = "Task Manager"
COLUMNS: tuple[str, ...] = ("Title", "Description", "Due Date", "Priority", "Status", "Actions")
PRIORITY_PLACEHOLDER = "Select Priority"
PRIORITY_OPTIONS: tuple[str, ...] = tuple(p.value for p in Priority)
EMPTY_TABLE_TEXT = "No tasks added"
LOADING_TEXT = "Loading tasks..."

_PRIORITY_CLASSES: dict[str, str] = {
    Priority.LOW.value: "priority-low",
    Priority.MEDIUM.value: "priority-medium",
    Priority.HIGH.value: "priority-high",
}

# en-US short month names, independent of the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def priority_class(priority: str | None) -> str:
    """Style class for a priority cell; empty for unknown priorities."""
    if not priority:
        return ""
    return _PRIORITY_CLASSES.get(priority, "")


def format_due_date(raw: str | None) -> str:
    """'2025-01-05' -> 'Jan 5, 2025'. Empty stays empty."""
    if not raw:
        return ""
    d = parse_due_date(raw)
    if d is None:
        return "Invalid Date"
    return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"


def status_label(completed: bool) -> str:
    return "Completed" if completed else "Pending"


def status_class(completed: bool) -> str:
    return "status complete" if completed else "status pending"


def submit_label(loading: bool) -> str:
    return "Adding..." if loading else "Add Task"


@dataclass(slots=True, frozen=True)
class TaskRow:
    key: str
    title: str
    description: str
    due_date: str
    priority: str
    priority_class: str
    status_label: str
    status_class: str
    buttons_disabled: bool


@dataclass(slots=True, frozen=True)
class FormView:
    title: str
    description: str
    due_date: str
    priority: str
    disabled: bool
    submit_label: str


@dataclass(slots=True, frozen=True)
class TaskTableView:
    heading: str
    error_banner: str | None
    form: FormView
    show_loading: bool
    rows: tuple[TaskRow, ...]
    empty_text: str | None


def build_view(view: ViewState, form: FormState) -> TaskTableView:
    rows = tuple(
        TaskRow(
            key=t.id,
            title=t.title,
            description=t.description,
            due_date=format_due_date(t.due_date),
            priority=t.priority,
            priority_class=priority_class(t.priority),
            status_label=status_label(t.completed),
            status_class=status_class(t.completed),
            buttons_disabled=view.loading,
        )
        for t in view.tasks
    )
    return TaskTableView(
        heading=HEADING,
        error_banner=f"Error: {view.error}" if view.error else None,
        form=FormView(
            title=form.title,
            description=form.description,
            due_date=form.due_date,
            priority=form.priority,
            disabled=view.loading,
            submit_label=submit_label(view.loading),
        ),
        show_loading=view.loading and not view.tasks,
        rows=rows,
        empty_text=EMPTY_TABLE_TEXT if not rows else None,
    )
