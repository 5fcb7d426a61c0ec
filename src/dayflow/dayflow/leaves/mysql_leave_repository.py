from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from .model import LeaveRow
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, db: DatabaseConnection):
        self._db = db

    def list_with_employee(self) -> Sequence[LeaveRow]:
        with self._db.cursor() as cur:
            cur.execute(
                """
                SELECT l.id, l.employee_id, e.name AS employee_name,
                       l.leave_type, l.start_date, l.end_date, l.status
                FROM leaves l
                JOIN employees e ON l.employee_id = e.id
                ORDER BY l.id
                """
            )
            return [
                LeaveRow(
                    id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    leave_type=r["leave_type"],
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    status=r["status"],
                )
                for r in cur.fetchall()
            ]

    def create(self, *, employee_id: int, leave_type: str, start_date: date, end_date: date, status: str) -> int:
        with self._db.cursor() as cur:
            cur.execute(
                """
                INSERT INTO leaves (employee_id, leave_type, start_date, end_date, status)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (employee_id, leave_type, start_date, end_date, status),
            )
            return int(cur.lastrowid)
