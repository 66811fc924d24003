# src/task_cli/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.commands import CommandRegistry, CommandReply, is_exit_line
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _print_reply(reply: CommandReply) -> None:
    if not reply.text:
        return
    print(reply.text, file=sys.stderr if reply.error else sys.stdout, flush=True)


def run_console_loop(state: AppState, registry: CommandRegistry | None = None) -> None:
    """
    Read commands from stdin one line at a time until a bare "exit" line.

    EOF and Ctrl+C end the loop the same way. A crashing handler is logged and
    reported; the loop keeps going.
    """
    registry = registry or command_registry
    prompt = str(getattr(state.settings, "prompt", "") or "")
    logger.info("Console loop started (tasks=%s).", state.task_store.path)

    while True:
        try:
            line = input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if is_exit_line(line):
            logger.info("Console exit command received.")
            break

        try:
            reply = registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = CommandReply("Internal error while handling a command.", error=True)

        _print_reply(reply)

    print("Goodbye.")
    logger.info("Console loop finished.")


def run_single_command(
    state: AppState, argv: list[str], registry: CommandRegistry | None = None
) -> CommandReply:
    """Run one command given as an argument vector (e.g. ["add", "Buy", "milk"])."""
    registry = registry or command_registry
    reply = registry.handle(state, " ".join([state.prog_name, *argv]))
    _print_reply(reply)
    return reply
