from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, db: DatabaseConnection):
        self._db = db

    def list_all(self) -> Sequence[Employee]:
        with self._db.cursor() as cur:
            cur.execute(
                """
                SELECT id, name, email, position, department, date_of_joining
                FROM employees
                ORDER BY id
                """
            )
            return [
                Employee(
                    id=int(r["id"]),
                    name=r["name"],
                    email=r["email"],
                    position=r.get("position"),
                    department=r.get("department"),
                    date_of_joining=r.get("date_of_joining"),
                )
                for r in cur.fetchall()
            ]

    def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        position: Optional[str],
        department: Optional[str],
        date_of_joining: Optional[date],
    ) -> int:
        with self._db.cursor() as cur:
            cur.execute(
                """
                INSERT INTO employees (name, email, password, position, department, date_of_joining)
                VALUES (%s, %s, %s, %s, %s, %s)
                """,
                (name, email, password_hash, position, department, date_of_joining),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        employee_id: int,
        name: str,
        email: str,
        position: Optional[str],
        department: Optional[str],
    ) -> int:
        with self._db.cursor() as cur:
            cur.execute(
                "UPDATE employees SET name=%s, email=%s, position=%s, department=%s WHERE id=%s",
                (name, email, position, department, int(employee_id)),
            )
            return cur.rowcount

    def delete_by_id(self, employee_id: int) -> int:
        with self._db.cursor() as cur:
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount
