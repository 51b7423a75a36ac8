# src/task_keeper/tasks/task_parsing.py

"""
Text -> value helpers shared by the store (update) and the console (prompts).

All parsers raise ParseError on bad input and never return a partial value.
"""

from __future__ import annotations

from datetime import date, datetime

from ..errors import ParseError
from .task_models import PRIORITY_HIGHEST, PRIORITY_LOWEST

DUE_DATE_FORMAT = "%Y-%m-%d"
DUE_DATE_DISPLAY_FORMAT = "%a %b %d %Y"

_TRUE_WORDS = {"1", "true", "yes", "y", "on"}
_FALSE_WORDS = {"0", "false", "no", "n", "off"}


def parse_int(raw: str) -> int:
    text = (raw or "").strip()
    try:
        return int(text)
    except ValueError:
        raise ParseError(f"Not a number: {raw!r}", raw=raw) from None


def parse_priority(raw: str) -> int:
    value = parse_int(raw)
    if not PRIORITY_HIGHEST <= value <= PRIORITY_LOWEST:
        raise ParseError(
            f"Priority must be between {PRIORITY_HIGHEST} and {PRIORITY_LOWEST}, got {value}",
            raw=raw,
        )
    return value


def parse_completed(raw: str) -> bool:
    text = (raw or "").strip().lower()
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ParseError(f"Expected true or false, got {raw!r}", raw=raw)


def parse_due_date(raw: str) -> date:
    """Parse a YYYY-MM-DD string."""
    text = (raw or "").strip()
    try:
        return datetime.strptime(text, DUE_DATE_FORMAT).date()
    except ValueError:
        raise ParseError(f"Expected a date as YYYY-MM-DD, got {raw!r}", raw=raw) from None


def format_due_date(value: object) -> str:
    if isinstance(value, date):
        return value.strftime(DUE_DATE_DISPLAY_FORMAT)
    return str(value)
