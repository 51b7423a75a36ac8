# src/task_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The monitor and the console depend on Protocols instead of concrete classes,
so tests can swap in fakes.
"""

from datetime import date
from typing import Any, Protocol


class TaskRepo(Protocol):
    # Console API
    def create_task(
            self,
            *,
            title: str,
            description: str,
            priority: int,
            due_date: date,
            completed: bool = False,
    ) -> Any: ...
    def remove_task(self, task_id: int) -> bool: ...
    def update_task(self, task_id: int, field: Any, new_value: str) -> bool: ...

    # Shared read API (console view + overdue monitor)
    def list_tasks(self) -> list[Any]: ...


class OverdueNotifier(Protocol):
    """
    Where overdue notices go.

    The monitor decides *which* tasks are overdue; the notifier decides how to
    present them (console line, log record, ...).
    """

    def notify_overdue(self, task: Any) -> None: ...
