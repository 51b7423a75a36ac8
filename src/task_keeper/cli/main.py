# src/task_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs:
- the overdue monitor in a background thread,
- the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import ResourceAllocationError
from ..logging_setup import setup_logging
from ..tasks.overdue_monitor import MonitorBackgroundRunner, start_monitor_in_background

logger = logging.getLogger(__name__)

MONITOR_JOIN_TIMEOUT_SECONDS = 5.0


def _shutdown(monitor_runner: MonitorBackgroundRunner | None) -> None:
    if monitor_runner is None:
        return
    monitor_runner.stop()
    monitor_runner.join(timeout=MONITOR_JOIN_TIMEOUT_SECONDS)
    if monitor_runner.is_alive():
        logger.warning("Overdue monitor did not stop within %ss.", MONITOR_JOIN_TIMEOUT_SECONDS)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    logger.info("Starting %s...", getattr(settings, "app_name", "task-keeper"))

    try:
        state = create_initial_state(settings=settings)
    except ResourceAllocationError as e:
        logger.error("Startup failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        # Unblocks input() in the console loop, which then exits normally.
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError, AttributeError):
        # Not on the main thread, or no SIGTERM on this platform.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    monitor_runner = start_monitor_in_background(state)
    try:
        run_console_loop(state)
    except KeyboardInterrupt:
        print("\nExiting task manager...")
    finally:
        _shutdown(monitor_runner)
        logger.info("Bye.")

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
