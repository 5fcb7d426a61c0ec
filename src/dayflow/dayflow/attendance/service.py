from __future__ import annotations

from typing import Any, Sequence

from ..common.validators import optional_clock_time, require_iso_date, require_positive_int, str_or_default
from ..core.enums import AttendanceStatus
from .model import AttendanceRow
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_attendance(self) -> Sequence[AttendanceRow]:
        return self._attendance.list_with_employee()

    def record_attendance(
        self,
        *,
        employee_id: Any,
        work_date: Any,
        check_in: Any = None,
        check_out: Any = None,
        status: Any = None,
    ) -> int:
        return self._attendance.create(
            employee_id=require_positive_int(employee_id, "employee_id"),
            work_date=require_iso_date(work_date, "date"),
            check_in=optional_clock_time(check_in, "check_in"),
            check_out=optional_clock_time(check_out, "check_out"),
            status=str_or_default(status, "status", AttendanceStatus.PRESENT.value),
        )
