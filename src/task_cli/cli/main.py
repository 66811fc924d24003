# src/task_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- runs the single command given on the command line (`task-cli add Buy milk`), or
- starts the interactive console loop when no arguments are given.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, run_single_command
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    setup_logging(
        log_dir=settings.data_dir if settings.log_file_enabled else None,
        console_level=settings.console_log_level,
    )

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    if argv is None:
        argv = sys.argv[1:]

    # Errors are reported in the output; the exit status stays 0 either way.
    if argv:
        run_single_command(state, argv)
    else:
        run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
