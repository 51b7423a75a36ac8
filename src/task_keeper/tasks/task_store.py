# src/task_keeper/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from ..errors import ParseError
from .task_models import ChangeKind, Task, TaskChange, TaskField
from .task_parsing import parse_completed, parse_priority

logger = logging.getLogger(__name__)

ChangeListener = Callable[[TaskChange], None]


class TaskStore:
    """
    In-memory task store.

    Ownership:
    - the task list never leaves the store; every read returns copies
    - tasks are copied on the way in as well, so callers cannot mutate a live record

    Thread-safety:
    - one lock serializes every operation (console thread + monitor thread)
    - the "changed" condition shares that lock; waking waiters is a hint only,
      list_tasks() is the only authoritative read
    - listeners run after the lock is released
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._version = 0
        self._lock = threading.Lock()
        self._changed = threading.Condition(self._lock)
        self._listeners: list[ChangeListener] = []
        logger.debug("TaskStore ready")

    # ---- low-level helpers (call with the lock held) ----

    def _find_index(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _signal(self, kind: ChangeKind, task_id: int) -> TaskChange:
        self._version += 1
        self._changed.notify_all()
        return TaskChange(kind=kind, task_id=task_id, version=self._version)

    def _publish(self, change: TaskChange) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(change)
            except Exception:
                logger.exception("Task change listener failed change=%s", change)

    # ---- change notification ----

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    def add_listener(self, listener: ChangeListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def wait_for_change(self, since_version: int, timeout: float | None = None) -> int:
        """
        Block until the change counter moves past since_version (or timeout).

        Returns the current version; equal to since_version means it timed out.
        """
        with self._changed:
            self._changed.wait_for(lambda: self._version > since_version, timeout=timeout)
            return self._version

    # ---- public API ----

    def next_id(self) -> int:
        with self._lock:
            task_id = self._next_id
            self._next_id += 1
            return task_id

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def add_task(self, task: Task) -> None:
        """Append a copy of task. Fields are not validated."""
        with self._lock:
            self._tasks.append(replace(task))
            # Explicit ids still advance the sequence so ids are never handed out twice.
            if task.id >= self._next_id:
                self._next_id = task.id + 1
            change = self._signal(ChangeKind.ADDED, task.id)
        logger.debug("Task added id=%s priority=%s due=%s", task.id, task.priority, task.due_date)
        self._publish(change)

    def create_task(
        self,
        *,
        title: str,
        description: str,
        priority: int,
        due_date: date,
        completed: bool = False,
    ) -> Task:
        """Assign the next id and append the task in one step."""
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                priority=priority,
                due_date=due_date,
                completed=completed,
            )
            self._next_id += 1
            self._tasks.append(task)
            change = self._signal(ChangeKind.ADDED, task.id)
            created = replace(task)
        logger.debug("Task created id=%s priority=%s due=%s", created.id, priority, due_date)
        self._publish(change)
        return created

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in insertion order."""
        with self._lock:
            return [replace(t) for t in self._tasks]

    def get_task(self, task_id: int) -> Task | None:
        with self._lock:
            idx = self._find_index(task_id)
            return replace(self._tasks[idx]) if idx is not None else None

    def remove_task(self, task_id: int) -> bool:
        """
        Remove the task with this id.

        "Changed" is signalled even when nothing matched; waiters must not read
        anything into a wake-up.
        """
        with self._lock:
            idx = self._find_index(task_id)
            if idx is not None:
                del self._tasks[idx]
            change = self._signal(ChangeKind.REMOVED, task_id)
        if idx is None:
            logger.debug("remove_task: no task id=%s", task_id)
        else:
            logger.debug("Task removed id=%s", task_id)
        self._publish(change)
        return idx is not None

    def update_task(self, task_id: int, field: TaskField | str, new_value: str) -> bool:
        """
        Set one field of a task from its text form.

        Returns False (and raises nothing) when no task has this id.
        For an existing task, raises ParseError (leaving it untouched) when the
        field name is unknown or new_value does not parse.
        due_date updates are accepted but ignored.
        """
        with self._lock:
            idx = self._find_index(task_id)
            if idx is None:
                logger.debug("update_task: no task id=%s", task_id)
                return False

            parsed_field = TaskField.from_text(str(field))
            if parsed_field is None:
                raise ParseError(f"Unknown field: {field!r}", raw=str(field))

            task = self._tasks[idx]
            if parsed_field is TaskField.TITLE:
                task.title = new_value
            elif parsed_field is TaskField.DESCRIPTION:
                task.description = new_value
            elif parsed_field is TaskField.PRIORITY:
                task.priority = parse_priority(new_value)
            elif parsed_field is TaskField.COMPLETED:
                task.completed = parse_completed(new_value)
            else:
                logger.warning("update_task: due_date updates are not supported (id=%s)", task_id)
                return False

            change = self._signal(ChangeKind.UPDATED, task_id)

        logger.debug("Task updated id=%s field=%s", task_id, parsed_field.value)
        self._publish(change)
        return True
