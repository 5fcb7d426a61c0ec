from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pytest
from mysql.connector import errors

from src.dayflow.dayflow.attendance.model import AttendanceRow
from src.dayflow.dayflow.container import Container, assemble_container
from src.dayflow.dayflow.employees.model import Employee
from src.dayflow.dayflow.leaves.model import LeaveRow
from src.dayflow.dayflow.main import create_app
from src.dayflow.dayflow.payroll.model import PayrollRow


@dataclass
class InMemoryStore:
    """Tables plus the foreign key and unique rules MySQL would enforce."""

    employees: dict[int, dict] = field(default_factory=dict)
    leaves: dict[int, dict] = field(default_factory=dict)
    attendance: dict[int, dict] = field(default_factory=dict)
    payroll: dict[int, dict] = field(default_factory=dict)
    _next_id: dict[str, int] = field(default_factory=dict)

    def insert(self, table: str, row: dict) -> int:
        rid = self._next_id.get(table, 0) + 1
        self._next_id[table] = rid
        getattr(self, table)[rid] = {"id": rid, **row}
        return rid

    def require_employee(self, employee_id: int) -> dict:
        emp = self.employees.get(employee_id)
        if not emp:
            raise errors.IntegrityError(
                msg="Cannot add or update a child row: a foreign key constraint fails",
                errno=1452,
                sqlstate="23000",
            )
        return emp


class InMemoryHealth:
    def __init__(self, *, down: bool = False):
        self.down = down

    def current_time(self) -> datetime:
        if self.down:
            raise errors.InterfaceError(msg="Can't connect to MySQL server on 'localhost:3306'", errno=2003)
        return datetime(2025, 3, 1, 9, 30, 0)


class InMemoryEmployees:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self):
        return [
            Employee(
                id=r["id"],
                name=r["name"],
                email=r["email"],
                position=r["position"],
                department=r["department"],
                date_of_joining=r["date_of_joining"],
            )
            for r in self._store.employees.values()
        ]

    def _check_unique_email(self, email: str, *, exclude_id: Optional[int] = None) -> None:
        for r in self._store.employees.values():
            if r["email"] == email and r["id"] != exclude_id:
                raise errors.IntegrityError(
                    msg=f"Duplicate entry '{email}' for key 'employees.email'", errno=1062, sqlstate="23000"
                )

    def create(self, *, name, email, password_hash, position, department, date_of_joining) -> int:
        self._check_unique_email(email)
        return self._store.insert(
            "employees",
            {
                "name": name,
                "email": email,
                "password": password_hash,
                "position": position,
                "department": department,
                "date_of_joining": date_of_joining,
            },
        )

    def update(self, *, employee_id, name, email, position, department) -> int:
        row = self._store.employees.get(employee_id)
        if not row:
            return 0
        self._check_unique_email(email, exclude_id=employee_id)
        row.update(name=name, email=email, position=position, department=department)
        return 1

    def delete_by_id(self, employee_id) -> int:
        if employee_id not in self._store.employees:
            return 0
        for table in ("leaves", "attendance", "payroll"):
            if any(r["employee_id"] == employee_id for r in getattr(self._store, table).values()):
                raise errors.IntegrityError(
                    msg="Cannot delete or update a parent row: a foreign key constraint fails",
                    errno=1451,
                    sqlstate="23000",
                )
        del self._store.employees[employee_id]
        return 1


class InMemoryLeaves:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_with_employee(self):
        return [
            LeaveRow(employee_name=self._store.employees[r["employee_id"]]["name"], **r)
            for r in self._store.leaves.values()
            if r["employee_id"] in self._store.employees
        ]

    def create(self, *, employee_id, leave_type, start_date, end_date, status) -> int:
        self._store.require_employee(employee_id)
        return self._store.insert(
            "leaves",
            {
                "employee_id": employee_id,
                "leave_type": leave_type,
                "start_date": start_date,
                "end_date": end_date,
                "status": status,
            },
        )


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_with_employee(self):
        return [
            AttendanceRow(employee_name=self._store.employees[r["employee_id"]]["name"], **r)
            for r in self._store.attendance.values()
            if r["employee_id"] in self._store.employees
        ]

    def create(self, *, employee_id, work_date, check_in, check_out, status) -> int:
        self._store.require_employee(employee_id)
        return self._store.insert(
            "attendance",
            {
                "employee_id": employee_id,
                "date": work_date,
                "check_in": check_in,
                "check_out": check_out,
                "status": status,
            },
        )


class InMemoryPayroll:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_with_employee(self):
        return [
            PayrollRow(employee_name=self._store.employees[r["employee_id"]]["name"], **r)
            for r in self._store.payroll.values()
            if r["employee_id"] in self._store.employees
        ]

    def create(self, *, employee_id, basic_salary, deductions, net_salary, pay_date) -> int:
        self._store.require_employee(employee_id)
        return self._store.insert(
            "payroll",
            {
                "employee_id": employee_id,
                "basic_salary": basic_salary,
                "deductions": deductions,
                "net_salary": net_salary,
                "pay_date": pay_date,
            },
        )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def health() -> InMemoryHealth:
    return InMemoryHealth()


@pytest.fixture
def container(store: InMemoryStore, health: InMemoryHealth) -> Container:
    return assemble_container(
        health_repo=health,
        employees_repo=InMemoryEmployees(store),
        leaves_repo=InMemoryLeaves(store),
        attendance_repo=InMemoryAttendance(store),
        payroll_repo=InMemoryPayroll(store),
    )


@pytest.fixture
def client(container: Container):
    app = create_app(container=container, settings_module="config.testing")
    return app.test_client()


@pytest.fixture
def jane(store: InMemoryStore) -> int:
    return store.insert(
        "employees",
        {
            "name": "Jane Doe",
            "email": "jane@dayflow.local",
            "password": "hash",
            "position": "Engineer",
            "department": "IT",
            "date_of_joining": date(2024, 3, 18),
        },
    )


