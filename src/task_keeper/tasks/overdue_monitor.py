# src/task_keeper/tasks/overdue_monitor.py

from __future__ import annotations

"""
Overdue monitor.

A small polling loop that:
- takes a snapshot of the store,
- picks tasks that are not completed and whose due moment has passed
  (a date-only due date means local midnight at the start of that day),
- reports each of them through an injected notifier port.

The monitor never mutates the store. Presentation belongs to the notifier.
"""

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime, time

from ..core.ports import OverdueNotifier, TaskRepo
from ..core.state import AppState
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 10.0


def due_moment(due: object) -> datetime | None:
    if isinstance(due, datetime):
        return due
    if isinstance(due, date):
        return datetime.combine(due, time.min)
    return None


def is_overdue(task: Task, now: datetime) -> bool:
    if task.completed:
        return False
    # A due date we cannot compare is "not overdue" rather than an error.
    moment = due_moment(task.due_date)
    if moment is None:
        return False
    return moment < now


def find_overdue(tasks: Iterable[Task], now: datetime) -> list[Task]:
    return [t for t in tasks if is_overdue(t, now)]


def scan_overdue(task_store: TaskRepo, notifier: OverdueNotifier, *, now: datetime) -> list[Task]:
    """One monitor tick. Returns the tasks that were reported."""
    try:
        tasks = task_store.list_tasks()
    except Exception:
        logger.exception("list_tasks failed")
        return []

    overdue = find_overdue(tasks, now)
    for task in overdue:
        try:
            notifier.notify_overdue(task)
        except Exception:
            logger.exception("notify_overdue failed task_id=%s", getattr(task, "id", None))

    if overdue:
        logger.debug("Overdue scan: %d of %d tasks overdue", len(overdue), len(tasks))
    return overdue


async def run_overdue_monitor(
        task_store: TaskRepo,
        notifier: OverdueNotifier,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        stop_event: asyncio.Event | None = None,
        clock: Callable[[], datetime] = datetime.now,
) -> None:
    """
    Polling monitor.

    Every interval_seconds:
    - snapshot the store via list_tasks()
    - report every incomplete task whose due moment is before clock()

    Stops when stop_event is set (checked between ticks, wakes the sleep early)
    or when the coroutine/task is cancelled.
    """
    sleep_s = max(0.01, float(interval_seconds))
    logger.info("Overdue monitor started (interval=%ss).", sleep_s)

    while stop_event is None or not stop_event.is_set():
        scan_overdue(task_store, notifier, now=clock())

        if stop_event is None:
            await asyncio.sleep(sleep_s)
        else:
            with contextlib.suppress(asyncio.TimeoutError):
                await asyncio.wait_for(stop_event.wait(), timeout=sleep_s)

    logger.info("Overdue monitor stopped.")


@dataclass
class MonitorBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except RuntimeError:
            # Loop already closed: the monitor has finished on its own.
            logger.debug("Monitor loop already closed.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)

    def is_alive(self) -> bool:
        return self.thread.is_alive()


def start_monitor_in_background(
        state: AppState,
        *,
        interval_seconds: float | None = None,
) -> MonitorBackgroundRunner | None:
    """
    Start the overdue monitor in a background thread.

    Why a thread:
    - the console REPL is blocking (input()).
    - the monitor is async and wants its own event loop.
    """
    settings = state.settings
    if not getattr(settings, "monitor_enabled", True):
        logger.info("Overdue monitor disabled, not starting.")
        return None

    if interval_seconds is None:
        interval_seconds = float(
            getattr(settings, "monitor_interval_seconds", DEFAULT_INTERVAL_SECONDS)
        )

    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(
                run_overdue_monitor(
                    state.task_store,
                    state.notifier,
                    interval_seconds=interval_seconds,
                    stop_event=stop_event,
                )
            )
        except Exception:
            logger.exception("Overdue monitor crashed.")
        finally:
            loop.close()

    t = threading.Thread(target=runner, name="overdue-monitor", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Overdue monitor thread did not initialize properly.")
        return None

    logger.info("Overdue monitor background thread started.")
    return MonitorBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)
