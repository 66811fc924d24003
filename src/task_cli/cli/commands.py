# src/task_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_models import InvalidTaskIdError, Task, TaskError, TaskStatus, parse_task_id

logger = logging.getLogger(__name__)

ACTIONS_SUMMARY = (
    "add, update, delete, mark-in-progress, mark-done, list [done|todo|in-progress], help"
)
SEPARATOR = "-" * 20


@dataclass(frozen=True, slots=True)
class CommandReply:
    text: str
    error: bool = False


CommandHandler = Callable[[AppState, list[str]], CommandReply]


def usage_text(prog_name: str) -> str:
    return f"Usage: {prog_name} <action> [arguments]\nActions: {ACTIONS_SUMMARY}"


def is_exit_line(line: str) -> bool:
    return line.strip() == "exit"


class CommandRegistry:
    """Action registry used by the console loop and one-shot mode (add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._args: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        args: str = "",
    ) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._args[key] = args

    def command_usage(self, prog_name: str, name: str) -> CommandReply:
        args = self._args.get(name, "")
        return CommandReply(f"Usage: {prog_name} {name} {args}".rstrip())

    def handle(self, state: AppState, line: str) -> CommandReply:
        """
        Handle a line like "task-cli <action> [arguments]".

        Anything that does not start with the invocation keyword, or names no
        action, gets the usage message back. A line starting with "exit" skips
        that check; "exit list" dispatches "list" like "<prog> list" would.
        """
        prog = state.prog_name
        tokens = line.split()
        if tokens[:1] != ["exit"] and (len(tokens) < 2 or tokens[0] != prog):
            return CommandReply(usage_text(prog))
        if len(tokens) < 2:
            # bare "exit" is handled by the loop before it gets here
            return CommandReply("")

        action = tokens[1].lower()
        handler = self._handlers.get(action)
        if handler is None:
            logger.debug("Unknown action %r", action)
            return CommandReply(f"Unknown action: {action}\n{usage_text(prog)}")

        return handler(state, tokens[2:])

    def build_help(self, prog_name: str) -> str:
        lines = ["Available actions:"]
        for name, help_text in self._help.items():
            synopsis = f"{name} {self._args[name]}".rstrip()
            lines.append(f"  {prog_name} {synopsis} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _error(e: TaskError) -> CommandReply:
    if isinstance(e, InvalidTaskIdError):
        logger.debug("Rejected task id %r", e.raw)
    return CommandReply(f"Error: {e}", error=True)


def format_task(task: Task) -> str:
    return "\n".join(
        [
            f"  ID: {task.id}",
            f"  Description: {task.description}",
            f"  Status: {task.status.value}",
            f"  Created At: {task.created_at}",
            f"  Updated At: {task.updated_at}",
            SEPARATOR,
        ]
    )


def cmd_add(state: AppState, args: list[str]) -> CommandReply:
    if not args:
        return registry.command_usage(state.prog_name, "add")

    task_id = state.task_store.add(" ".join(args))
    return CommandReply(f"Task added successfully (ID: {task_id})")


def cmd_update(state: AppState, args: list[str]) -> CommandReply:
    if len(args) < 2:
        return registry.command_usage(state.prog_name, "update")

    try:
        task_id = parse_task_id(args[0])
        state.task_store.update(task_id, " ".join(args[1:]))
    except TaskError as e:
        return _error(e)
    return CommandReply(f"Task (ID: {task_id}) updated successfully.")


def cmd_delete(state: AppState, args: list[str]) -> CommandReply:
    if not args:
        return registry.command_usage(state.prog_name, "delete")

    try:
        task_id = parse_task_id(args[0])
        state.task_store.delete(task_id)
    except TaskError as e:
        return _error(e)
    return CommandReply(f"Task (ID: {task_id}) deleted successfully.")


def _mark(state: AppState, args: list[str], name: str, status: TaskStatus) -> CommandReply:
    if not args:
        return registry.command_usage(state.prog_name, name)

    try:
        task_id = parse_task_id(args[0])
        changed = state.task_store.set_status(task_id, status)
    except TaskError as e:
        return _error(e)

    if not changed:
        return CommandReply(f"Task (ID: {task_id}) is already '{status.value}'.")
    return CommandReply(f"Task (ID: {task_id}) marked as '{status.value}'.")


def cmd_mark_in_progress(state: AppState, args: list[str]) -> CommandReply:
    return _mark(state, args, "mark-in-progress", TaskStatus.IN_PROGRESS)


def cmd_mark_done(state: AppState, args: list[str]) -> CommandReply:
    return _mark(state, args, "mark-done", TaskStatus.DONE)


def cmd_list(state: AppState, args: list[str]) -> CommandReply:
    """
    list          -> all tasks
    list <status> -> only tasks in that status (done | todo | in-progress)
    """
    status: TaskStatus | None = None
    if args:
        status = TaskStatus.parse(args[0])
        if status is None:
            return registry.command_usage(state.prog_name, "list")

    tasks = state.task_store.list_tasks(status)
    header = "All Tasks:" if status is None else f"Tasks with status '{status.value}':"
    if not tasks:
        return CommandReply(f"{header}\nNo tasks found.")
    return CommandReply("\n".join([header, *(format_task(t) for t in tasks)]))


def cmd_help(state: AppState, args: list[str]) -> CommandReply:
    return CommandReply(registry.build_help(state.prog_name))


def cmd_exit(state: AppState, args: list[str]) -> CommandReply:
    # Only a bare "exit" line ends the loop; "<prog> exit" does nothing.
    return CommandReply("")


registry.register("add", cmd_add, help_text="Add a new task.", args="<description>")
registry.register(
    "update", cmd_update, help_text="Replace a task's description.", args="<id> <description>"
)
registry.register("delete", cmd_delete, help_text="Delete a task.", args="<id>")
registry.register(
    "mark-in-progress",
    cmd_mark_in_progress,
    help_text="Mark a task as in progress.",
    args="<id>",
)
registry.register("mark-done", cmd_mark_done, help_text="Mark a task as done.", args="<id>")
registry.register(
    "list", cmd_list, help_text="List tasks, optionally by status.", args="[done|todo|in-progress]"
)
registry.register("help", cmd_help, help_text="Show available actions.")
registry.register("exit", cmd_exit, help_text="No-op; type a bare 'exit' to quit.")
