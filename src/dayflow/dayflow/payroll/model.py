from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class PayrollRow:
    """Read-model: a payroll entry joined with its employee's name."""

    id: int
    employee_id: int
    employee_name: str
    basic_salary: Decimal
    deductions: Decimal
    net_salary: Decimal
    pay_date: date
