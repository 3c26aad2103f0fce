# src/taskview/connectors/console_connector.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sys
import threading
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.render import COLUMNS, LOADING_TEXT, TaskTableView, build_view
from ..core.state import AppState

logger = logging.getLogger(__name__)

MAX_CELL = 32

_RESET = "\033[0m"
_CLASS_COLORS = {
    "priority-high": "\033[31m",
    "priority-medium": "\033[33m",
    "priority-low": "\033[32m",
    "status complete": "\033[32m",
    "status pending": "\033[2m",
}
_ERROR_COLOR = "\033[31;1m"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _clip(text: str, width: int = MAX_CELL) -> str:
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def _paint(text: str, css_class: str, color: bool) -> str:
    code = _CLASS_COLORS.get(css_class, "")
    if not color or not code:
        return text
    return f"{code}{text}{_RESET}"


def render_text(view: TaskTableView, *, color: bool = False) -> str:
    """Render the task view as a fixed-width text table."""
    lines: list[str] = [view.heading, "=" * len(view.heading)]

    if view.error_banner:
        banner = view.error_banner
        lines.append(f"{_ERROR_COLOR}{banner}{_RESET}" if color else banner)

    if view.show_loading:
        lines.append(LOADING_TEXT)
        return "\n".join(lines)

    header = ("#",) + COLUMNS
    cells: list[tuple[str, ...]] = []
    classes: list[tuple[str, ...]] = []
    for i, row in enumerate(view.rows, start=1):
        delete = "[Delete]" if not row.buttons_disabled else "(Delete)"
        status = f"[{row.status_label}]" if not row.buttons_disabled else f"({row.status_label})"
        cells.append(
            (
                str(i),
                _clip(row.title),
                _clip(row.description),
                row.due_date,
                row.priority,
                status,
                delete,
            )
        )
        classes.append(("", "", "", "", row.priority_class, row.status_class, ""))

    widths = [len(h) for h in header]
    for r in cells:
        for j, c in enumerate(r):
            widths[j] = max(widths[j], len(c))

    def _line(values: tuple[str, ...], styles: tuple[str, ...] | None = None) -> str:
        out = []
        for j, v in enumerate(values):
            padded = v.ljust(widths[j])
            if styles:
                padded = _paint(padded, styles[j], color)
            out.append(padded)
        return " | ".join(out).rstrip()

    lines.append(_line(header))
    lines.append("-+-".join("-" * w for w in widths))
    if view.empty_text:
        lines.append(view.empty_text)
    for values, styles in zip(cells, classes):
        lines.append(_line(values, styles))

    lines.append("")
    lines.append(f"/add -> {view.form.submit_label}   /toggle <#>   /delete <#>   /help")
    return "\n".join(lines)


async def _ainput(text: str) -> str:
    """
    Read one line without blocking the event loop.

    The read runs on a daemon thread so that a pending input() never keeps
    the interpreter alive after Ctrl+C or /exit.
    """
    loop = asyncio.get_running_loop()
    fut: asyncio.Future[str] = loop.create_future()

    def _deliver(value: str | None, exc: BaseException | None) -> None:
        if fut.done():
            return
        if exc is not None:
            fut.set_exception(exc)
        else:
            fut.set_result(value or "")

    def _read() -> None:
        try:
            line = input(text)
        except (EOFError, OSError, ValueError) as exc:
            result, error = None, exc
        else:
            result, error = line, None
        # The loop may already be closed if the app quit while we were blocked.
        with contextlib.suppress(RuntimeError):
            loop.call_soon_threadsafe(_deliver, result, error)

    threading.Thread(target=_read, name="console-input", daemon=True).start()
    return await fut


def _show(state: AppState) -> None:
    ctl = state.controller
    print(render_text(build_view(ctl.state, ctl.form), color=state.color))


async def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (api=%s).", getattr(state.settings, "api_base_url", "?"))
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    ctl = state.controller
    await ctl.mount()
    _show(state)

    try:
        while True:
            try:
                user_input = (await _ainput("\n>>> ")).strip()
            except (EOFError, OSError, ValueError) as exc:
                logger.info("Console input closed (%s), exiting.", type(exc).__name__)
                break

            if not user_input:
                _show(state)
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = await command_registry.handle(state, user_input, prompt=_ainput)
            except EOFError:
                logger.info("Console input closed during a command, exiting.")
                break
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is None:
                reply = "Not a command. Use /help to list available commands."

            print()
            _show(state)
            if reply:
                _print_ts(reply)
    finally:
        ctl.unmount()
        sys.stdout.flush()

    logger.info("Console connector finished.")
