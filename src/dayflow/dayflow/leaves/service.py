from __future__ import annotations

from typing import Any, Sequence

from ..common.validators import require_iso_date, require_non_empty, require_positive_int, str_or_default
from ..core.enums import LeaveStatus
from .model import LeaveRow
from .repository import LeaveRepository


class LeaveService:
    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def list_leaves(self) -> Sequence[LeaveRow]:
        return self._leaves.list_with_employee()

    def request_leave(
        self,
        *,
        employee_id: Any,
        leave_type: Any,
        start_date: Any,
        end_date: Any,
        status: Any = None,
    ) -> int:
        # Date ordering is not checked; the record is stored as submitted.
        return self._leaves.create(
            employee_id=require_positive_int(employee_id, "employee_id"),
            leave_type=require_non_empty(leave_type, "leave_type"),
            start_date=require_iso_date(start_date, "start_date"),
            end_date=require_iso_date(end_date, "end_date"),
            status=str_or_default(status, "status", LeaveStatus.PENDING.value),
        )
