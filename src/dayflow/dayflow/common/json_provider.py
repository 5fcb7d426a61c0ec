from __future__ import annotations

from datetime import date, time, timedelta
from decimal import Decimal
from typing import Any

from flask.json.provider import DefaultJSONProvider

from .datetime_utils import time_of_day


def _default(o: Any) -> Any:
    # date covers datetime too; Flask would otherwise emit RFC 822 strings.
    if isinstance(o, date):
        return o.isoformat()
    if isinstance(o, time):
        return o.strftime("%H:%M:%S")
    if isinstance(o, timedelta):
        return time_of_day(o).strftime("%H:%M:%S")
    if isinstance(o, Decimal):
        return float(o)
    return DefaultJSONProvider.default(o)


class DayflowJSONProvider(DefaultJSONProvider):
    """JSON provider emitting ISO dates, HH:MM:SS times and numeric amounts."""

    default = staticmethod(_default)
