# tests/test_render.py

from __future__ import annotations

from taskview.connectors.console_connector import render_text
from taskview.core.render import (
    COLUMNS,
    build_view,
    format_due_date,
    priority_class,
    status_class,
    status_label,
    submit_label,
)
from taskview.core.state import FormState, ViewState

from .conftest import make_task


def test_priority_class_mapping() -> None:
    assert priority_class("Low") == "priority-low"
    assert priority_class("Medium") == "priority-medium"
    assert priority_class("High") == "priority-high"
    assert priority_class("high") == ""
    assert priority_class("Urgent") == ""
    assert priority_class(None) == ""


def test_format_due_date() -> None:
    assert format_due_date("2025-01-05") == "Jan 5, 2025"
    assert format_due_date("2024-12-31T00:00:00.000Z") == "Dec 31, 2024"
    assert format_due_date("") == ""
    assert format_due_date("soon") == "Invalid Date"
    assert format_due_date("2025-01-05garbage") == "Invalid Date"


def test_labels() -> None:
    assert status_label(True) == "Completed"
    assert status_label(False) == "Pending"
    assert status_class(True) == "status complete"
    assert status_class(False) == "status pending"
    assert submit_label(False) == "Add Task"
    assert submit_label(True) == "Adding..."


def test_build_view_rows_and_banner() -> None:
    view = ViewState(
        tasks=[make_task("1", title="Write", priority="High", due="2025-01-05", completed=True)],
        error="Failed to fetch tasks",
    )
    out = build_view(view, FormState(title="draft"))

    assert out.heading == "Task Manager"
    assert out.error_banner == "Error: Failed to fetch tasks"
    assert out.form.title == "draft"
    assert out.form.disabled is False
    assert out.empty_text is None
    assert out.show_loading is False

    row = out.rows[0]
    assert row.key == "1"
    assert row.due_date == "Jan 5, 2025"
    assert row.priority_class == "priority-high"
    assert row.status_label == "Completed"
    assert row.buttons_disabled is False


def test_build_view_while_loading() -> None:
    empty = build_view(ViewState(loading=True), FormState())
    assert empty.show_loading is True
    assert empty.form.disabled is True
    assert empty.form.submit_label == "Adding..."

    busy = build_view(ViewState(tasks=[make_task("1")], loading=True), FormState())
    assert busy.show_loading is False
    assert busy.rows[0].buttons_disabled is True


def test_render_text_table() -> None:
    view = build_view(ViewState(tasks=[make_task("1", title="Write report", priority="Low")]), FormState())
    text = render_text(view)
    for col in COLUMNS:
        assert col in text
    assert "Write report" in text
    assert "[Pending]" in text
    assert "\033[" not in text

    assert "No tasks added" in render_text(build_view(ViewState(), FormState()))
    assert "Loading tasks..." in render_text(build_view(ViewState(loading=True), FormState()))
