from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..common.datetime_utils import time_of_day
from ..database.connection import DatabaseConnection
from .model import AttendanceRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, db: DatabaseConnection):
        self._db = db

    def list_with_employee(self) -> Sequence[AttendanceRow]:
        with self._db.cursor() as cur:
            cur.execute(
                """
                SELECT a.id, a.employee_id, e.name AS employee_name,
                       a.date, a.check_in, a.check_out, a.status
                FROM attendance a
                JOIN employees e ON a.employee_id = e.id
                ORDER BY a.id
                """
            )
            return [
                AttendanceRow(
                    id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    date=r["date"],
                    check_in=time_of_day(r.get("check_in")),
                    check_out=time_of_day(r.get("check_out")),
                    status=r["status"],
                )
                for r in cur.fetchall()
            ]

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in: Optional[time],
        check_out: Optional[time],
        status: str,
    ) -> int:
        with self._db.cursor() as cur:
            cur.execute(
                """
                INSERT INTO attendance (employee_id, date, check_in, check_out, status)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (employee_id, work_date, check_in, check_out, status),
            )
            return int(cur.lastrowid)
