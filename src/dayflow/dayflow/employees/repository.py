from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    The service layer depends on this protocol, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(
        self,
        *,
        employee_id: int,
        name: str,
        email: str,
        position: Optional[str],
        department: Optional[str],
    ) -> int:
        """Returns the number of affected rows."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> int:
        raise NotImplementedError
