from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import LeaveRow


class LeaveRepository(Protocol):
    def list_with_employee(self) -> Sequence[LeaveRow]:
        raise NotImplementedError

    def create(self, *, employee_id: int, leave_type: str, start_date: date, end_date: date, status: str) -> int:
        raise NotImplementedError
