# src/task_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- creates the single TaskStore for this process,
- wires the store and the overdue notifier into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier
from ..core.ports import OverdueNotifier
from ..core.state import AppState
from ..errors import ResourceAllocationError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store() -> TaskStore:
    try:
        return TaskStore()
    except MemoryError as e:
        raise ResourceAllocationError("Cannot allocate memory for the task store") from e


def create_initial_state(
    *,
    settings=None,
    notifier: OverdueNotifier | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        task_store=create_task_store(),
        notifier=notifier or ConsoleNotifier(),
    )
    logger.debug("AppState ready (app=%s).", getattr(settings, "app_name", "task-keeper"))
    return state
