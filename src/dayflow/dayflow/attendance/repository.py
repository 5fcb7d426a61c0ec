from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from .model import AttendanceRow


class AttendanceRepository(Protocol):
    def list_with_employee(self) -> Sequence[AttendanceRow]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in: Optional[time],
        check_out: Optional[time],
        status: str,
    ) -> int:
        raise NotImplementedError
