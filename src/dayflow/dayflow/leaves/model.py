from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LeaveRow:
    """Read-model: a leave joined with its employee's name."""

    id: int
    employee_id: int
    employee_name: str
    leave_type: str
    start_date: date
    end_date: date
    status: str
