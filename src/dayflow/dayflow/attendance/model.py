from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model: an attendance record joined with its employee's name."""

    id: int
    employee_id: int
    employee_name: str
    date: date
    check_in: Optional[time]
    check_out: Optional[time]
    status: str
