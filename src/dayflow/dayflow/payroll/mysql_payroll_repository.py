from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from ..database.connection import DatabaseConnection
from .model import PayrollRow
from .repository import PayrollRepository


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, db: DatabaseConnection):
        self._db = db

    def list_with_employee(self) -> Sequence[PayrollRow]:
        with self._db.cursor() as cur:
            cur.execute(
                """
                SELECT p.id, p.employee_id, e.name AS employee_name,
                       p.basic_salary, p.deductions, p.net_salary, p.pay_date
                FROM payroll p
                JOIN employees e ON p.employee_id = e.id
                ORDER BY p.id
                """
            )
            return [
                PayrollRow(
                    id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    basic_salary=Decimal(r["basic_salary"]),
                    deductions=Decimal(r["deductions"] or 0),
                    net_salary=Decimal(r["net_salary"]),
                    pay_date=r["pay_date"],
                )
                for r in cur.fetchall()
            ]

    def create(
        self,
        *,
        employee_id: int,
        basic_salary: Decimal,
        deductions: Decimal,
        net_salary: Decimal,
        pay_date: date,
    ) -> int:
        with self._db.cursor() as cur:
            cur.execute(
                """
                INSERT INTO payroll (employee_id, basic_salary, deductions, net_salary, pay_date)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (employee_id, basic_salary, deductions, net_salary, pay_date),
            )
            return int(cur.lastrowid)
