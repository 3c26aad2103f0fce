# src/taskview/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from datetime import date
from typing import cast

from ..core.render import PRIORITY_OPTIONS, PRIORITY_PLACEHOLDER
from ..core.state import AppState
from ..tasks.task_models import Priority

Prompt = Callable[[str], Awaitable[str]]
CommandHandler2 = Callable[[AppState, list[str]], Awaitable[str]]
CommandHandler3 = Callable[[AppState, list[str], Prompt | None], Awaitable[str]]
CommandHandler = CommandHandler2 | CommandHandler3

CANCEL_WORD = "/cancel"
BUSY_TEXT = "Busy, please wait for the current operation to finish."

logger = logging.getLogger(__name__)


class FormCancelled(Exception):
    """User typed /cancel while filling the add-task form."""


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        state: AppState,
        line: str,
        prompt: Prompt | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return await h3(state, args, prompt)

        h2 = cast(CommandHandler2, handler)
        return await h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_task_id(state: AppState, ref: str) -> str:
    """
    Map a row number from the table (1-based) to a task id.
    Anything that is not a valid row number is taken as a task id.
    """
    tasks = state.controller.state.tasks
    if ref.isdigit():
        n = int(ref)
        if 1 <= n <= len(tasks):
            return tasks[n - 1].id
    return ref


async def _ask_field(prompt: Prompt, label: str, current: str, check: Callable[[str], str | None]) -> str:
    """
    Ask until `check` accepts the answer. Empty input keeps `current` when it is set.
    `check` returns the normalized value or None to re-ask.
    """
    while True:
        hint = f" [{current}]" if current else ""
        raw = (await prompt(f"{label}{hint}: ")).strip()
        if raw.lower() == CANCEL_WORD:
            raise FormCancelled()
        if not raw:
            raw = current
        if not raw:
            continue
        value = check(raw)
        if value is not None:
            return value


def _check_text(raw: str) -> str | None:
    return raw or None


def _check_date(raw: str) -> str | None:
    try:
        return date.fromisoformat(raw).isoformat()
    except ValueError:
        return None


def _check_priority(raw: str) -> str | None:
    p = Priority.parse(raw)
    return p.value if p else None


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_refresh(state: AppState, args: list[str]) -> str:
    ok = await state.controller.load_tasks()
    return "" if ok else "Could not refresh the task list."


async def cmd_status(state: AppState, args: list[str]) -> str:
    ctl = state.controller
    base_url = getattr(state.settings, "api_base_url", "?")
    return (
        "Status:\n"
        f"  API: {base_url}\n"
        f"  Tasks: {len(ctl.state.tasks)}\n"
        f"  Busy: {'yes' if ctl.state.loading else 'no'}"
    )


async def cmd_add(state: AppState, args: list[str], prompt: Prompt | None) -> str:
    """
    /add -> fill the form field by field, then submit.

    All four fields are required; the date must be YYYY-MM-DD and the
    priority one of Low/Medium/High. Type /cancel to leave the form as is.
    """
    ctl = state.controller
    if ctl.state.loading:
        return BUSY_TEXT
    if prompt is None:
        return "/add needs an interactive console."

    form = ctl.form
    options = "/".join(PRIORITY_OPTIONS)
    try:
        form.set_field("title", await _ask_field(prompt, "Task Title", form.title, _check_text))
        form.set_field(
            "description",
            await _ask_field(prompt, "Task Description", form.description, _check_text),
        )
        form.set_field(
            "dueDate", await _ask_field(prompt, "Due Date (YYYY-MM-DD)", form.due_date, _check_date)
        )
        form.set_field(
            "priority",
            await _ask_field(prompt, f"{PRIORITY_PLACEHOLDER} ({options})", form.priority, _check_priority),
        )
    except FormCancelled:
        return "Form left unsubmitted."

    ok = await ctl.submit()
    return "Task added." if ok else ""


async def cmd_toggle(state: AppState, args: list[str]) -> str:
    """/toggle <row|id> -> flip Completed/Pending."""
    if len(args) != 1:
        return "Usage: /toggle <row number or task id>"
    if state.controller.state.loading:
        return BUSY_TEXT
    await state.controller.toggle_complete(resolve_task_id(state, args[0]))
    return ""


async def cmd_delete(state: AppState, args: list[str], prompt: Prompt | None) -> str:
    """/delete <row|id> -> ask for confirmation, then delete."""
    ctl = state.controller
    if len(args) != 1:
        return "Usage: /delete <row number or task id>"
    if ctl.state.loading:
        return BUSY_TEXT
    if prompt is None:
        return "/delete needs an interactive console."

    question = ctl.request_delete(resolve_task_id(state, args[0]))
    answer = (await prompt(f"{question} [y/N]: ")).strip().lower()
    if answer not in ("y", "yes"):
        ctl.cancel_delete()
        return "Delete cancelled."

    ok = await ctl.confirm_delete()
    return "Task deleted." if ok else ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "refresh", cmd_refresh, help_text="Reload the task list from the server.", aliases=["list", "ls"]
)
registry.register("status", cmd_status, help_text="Show API address and busy state.")
registry.register("add", cmd_add, help_text="Add a task (prompts for each field, /cancel to stop).")
registry.register(
    "toggle", cmd_toggle, help_text="Toggle Completed/Pending: /toggle <row|id>.", aliases=["t"]
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task after confirmation: /delete <row|id>.", aliases=["rm"]
)
