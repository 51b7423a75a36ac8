# src/task_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import CommandAsk, CommandEmitter
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_line(text: str) -> None:
    print(text, flush=True)


class ConsoleNotifier:
    """
    OverdueNotifier that prints one line per overdue task.

    Runs on the monitor thread; print() of a single line is enough here,
    the line may land next to a pending prompt.
    """

    def __init__(self, emit: Callable[[str], None] | None = None, *, timestamps: bool = True) -> None:
        self._emit = emit or _print_line
        self._timestamps = timestamps

    def notify_overdue(self, task: Task) -> None:
        text = f"Task '{task.title}' is overdue!"
        logger.info("Overdue notice task_id=%s", task.id)
        if self._timestamps:
            text = f"[{_ts_local()}] {text}"
        self._emit(text)


def run_console_loop(
    state: AppState,
    *,
    ask: CommandAsk = input,
    emit: CommandEmitter | None = None,
) -> None:
    """
    Blocking prompt loop: read a command, run it, print the reply.

    Returns on "exit", EOF or Ctrl+C.
    """
    out = emit or _print_line
    logger.info("Console connector started.")
    out("Welcome to the Task Manager!")

    while True:
        try:
            command = ask("Enter command: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            out("Exiting task manager...")
            break

        if command == EXIT_COMMAND:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, command, ask, out)
        except EOFError:
            logger.info("Console EOF received mid-command, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt mid-command, exiting.")
            out("")
            out("Exiting task manager...")
            break
        except Exception:
            logger.exception("Command handler crashed command=%r", command)
            reply = "Internal error while handling a command."

        out(reply)

    logger.info("Console connector finished.")
