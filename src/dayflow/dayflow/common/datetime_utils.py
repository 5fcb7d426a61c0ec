from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS string into time."""
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def time_of_day(value: Any) -> Optional[time]:
    """Coerce a MySQL TIME column value into ``datetime.time``.

    The C extension and the pure-Python connector disagree here: TIME comes
    back as ``timedelta`` (seconds since midnight), as ``time`` or, from some
    text protocols, as an ``HH:MM[:SS]`` string.
    """
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        return (datetime.min + value % timedelta(days=1)).time()
    if isinstance(value, str):
        return parse_clock_time(value.strip())
    raise TypeError(f"Unsupported TIME value: {value!r}")
