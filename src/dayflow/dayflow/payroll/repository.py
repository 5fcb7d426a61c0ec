from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol, Sequence

from .model import PayrollRow


class PayrollRepository(Protocol):
    def list_with_employee(self) -> Sequence[PayrollRow]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        basic_salary: Decimal,
        deductions: Decimal,
        net_salary: Decimal,
        pay_date: date,
    ) -> int:
        raise NotImplementedError
