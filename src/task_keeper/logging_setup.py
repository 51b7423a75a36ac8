# src/task_keeper/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

MONITOR_LOGGER = "task_keeper.tasks.overdue_monitor"


class _PromptFriendlyFilter(logging.Filter):
    """
    Keep stderr from burying the task prompts.

    The overdue monitor already prints its notices, so its own records only
    reach the console at WARNING+. Anything not from task_keeper (including
    'py.warnings') needs ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == MONITOR_LOGGER or name.startswith(MONITOR_LOGGER + "."):
            return record.levelno >= logging.WARNING
        if name.startswith("task_keeper."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Install the task-keeper handlers on the root logger.

    stderr gets console_level and above, through _PromptFriendlyFilter.
    log_file, when given, gets every record from file_level up; its parent
    directory is created. Existing root handlers are replaced, so calling this
    twice does not duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)-7s [%(threadName)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    console.addFilter(_PromptFriendlyFilter())
    root.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.captureWarnings(True)
