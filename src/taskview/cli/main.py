# src/taskview/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console task view until
the user exits.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import replace

from ..cli.bootstrap import close_state, create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(settings) -> None:
    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)
    try:
        await run_console_loop(state)
    finally:
        await close_state(state)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (api=%s)...", settings.app_name, settings.api_base_url)

    # Colour only makes sense on a real terminal.
    if not sys.stdout.isatty():
        settings = replace(settings, color=False)

    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
