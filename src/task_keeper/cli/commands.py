# src/task_keeper/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from ..core.state import AppState
from ..errors import ParseError
from ..tasks.task_models import TaskField
from ..tasks.task_parsing import (
    format_due_date,
    parse_due_date,
    parse_int,
    parse_priority,
)

CommandAsk = Callable[[str], str]
CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, CommandAsk, CommandEmitter], str]

T = TypeVar("T")

INVALID_COMMAND = "Invalid command."
SEPARATOR = "---------------------"

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Command registry used by the console connector (add, view, ...).

    Commands are matched case-sensitively on the first word of the line.
    """

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
        self._handlers[name] = handler
        self._help[name] = help_text
        for alias in aliases:
            self._handlers[alias] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def handle(
        self,
        state: AppState,
        line: str,
        ask: CommandAsk,
        emit: CommandEmitter,
    ) -> str:
        """
        Handle one command line and return the reply to print.

        Unknown commands (and empty lines) get INVALID_COMMAND.
        """
        parts = line.split()
        if not parts:
            return INVALID_COMMAND

        handler = self._handlers.get(parts[0])
        if handler is None:
            logger.debug("Unknown command: %r", parts[0])
            return INVALID_COMMAND

        return handler(state, ask, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  exit - Quit the task manager.")
        return "\n".join(lines)


registry = CommandRegistry()


def ask_until_valid(
    ask: CommandAsk,
    emit: CommandEmitter,
    prompt: str,
    parser: Callable[[str], T],
) -> T:
    """Re-prompt until parser accepts the answer."""
    while True:
        raw = ask(prompt)
        try:
            return parser(raw)
        except ParseError as e:
            emit(f"Invalid input: {e}")


def cmd_help(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    return registry.build_help()


def cmd_add(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    title = ask("Enter task title: ")
    description = ask("Enter task description: ")
    priority = ask_until_valid(
        ask, emit, "Enter task priority (1-3, 1 being highest): ", parse_priority
    )
    due_date = ask_until_valid(ask, emit, "Enter due date (YYYY-MM-DD): ", parse_due_date)

    task = state.task_store.create_task(
        title=title,
        description=description,
        priority=priority,
        due_date=due_date,
    )
    logger.info("Task %s added via console.", task.id)
    return "Task added!"


def cmd_view(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks yet."

    lines = ["Tasks:"]
    for task in tasks:
        lines.append(f"ID: {task.id}")
        lines.append(f"Title: {task.title}")
        lines.append(f"Description: {task.description}")
        lines.append(f"Priority: {task.priority}")
        lines.append(f"Due Date: {format_due_date(task.due_date)}")
        lines.append(f"Completed: {'Yes' if task.completed else 'No'}")
        lines.append(SEPARATOR)
    return "\n".join(lines)


def cmd_remove(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    task_id = ask_until_valid(ask, emit, "Enter task ID to remove: ", parse_int)
    if state.task_store.remove_task(task_id):
        return "Task removed!"
    return f"No task with ID {task_id}."


def cmd_update(state: AppState, ask: CommandAsk, emit: CommandEmitter) -> str:
    task_id = ask_until_valid(ask, emit, "Enter task ID to update: ", parse_int)
    field = ask(
        "Enter field to update (title, description, priority, due_date, completed): "
    ).strip()
    new_value = ask("Enter new value: ")

    if TaskField.from_text(field) is TaskField.DUE_DATE:
        return "Due date updates are not supported."

    try:
        updated = state.task_store.update_task(task_id, field, new_value)
    except ParseError as e:
        logger.info("Update rejected for task %s: %s", task_id, e)
        return f"Task not updated: {e}"

    if not updated:
        return f"No task with ID {task_id}."
    return "Task updated!"


registry.register("add", cmd_add, help_text="Add a task (prompts for each field).")
registry.register("view", cmd_view, help_text="Show all tasks.")
registry.register("remove", cmd_remove, help_text="Remove a task by ID.")
registry.register(
    "update", cmd_update, help_text="Update one field of a task by ID."
)
registry.register("help", cmd_help, help_text="Show available commands.")
