from __future__ import annotations

from typing import Any, Sequence

from werkzeug.security import generate_password_hash

from ..common.validators import (
    optional_iso_date,
    optional_str,
    require_email,
    require_min_length,
    require_non_empty,
)
from ..core.constants import MIN_PASSWORD_LENGTH
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage employee records."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def create_employee(
        self,
        *,
        name: Any,
        email: Any,
        password: Any,
        position: Any = None,
        department: Any = None,
        date_of_joining: Any = None,
    ) -> int:
        name = require_non_empty(name, "name")
        email = require_email(email)
        require_min_length(password, "password", MIN_PASSWORD_LENGTH)

        return self._employees.create(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            position=optional_str(position, "position"),
            department=optional_str(department, "department"),
            date_of_joining=optional_iso_date(date_of_joining, "date_of_joining"),
        )

    def update_employee(
        self,
        employee_id: int,
        *,
        name: Any,
        email: Any,
        position: Any = None,
        department: Any = None,
    ) -> int:
        """Overwrite the editable columns. Returns the affected row count.

        A missing id is not an error: callers get 0 back and decide.
        """

        return self._employees.update(
            employee_id=int(employee_id),
            name=require_non_empty(name, "name"),
            email=require_email(email),
            position=optional_str(position, "position"),
            department=optional_str(department, "department"),
        )

    def delete_employee(self, employee_id: int) -> int:
        return self._employees.delete_by_id(int(employee_id))
