from __future__ import annotations

from decimal import Decimal

from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: basic - deductions, not below 0."""

    def net_salary(self, *, basic_salary: Decimal, deductions: Decimal) -> Decimal:
        return max(basic_salary - deductions, Decimal("0"))
