from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.validators import optional_amount, require_amount, require_iso_date, require_positive_int
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRow
from .repository import PayrollRepository


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._calculator = calculator or StandardPayrollCalculator()

    def list_payroll(self) -> Sequence[PayrollRow]:
        return self._payroll.list_with_employee()

    def add_payroll(
        self,
        *,
        employee_id: Any,
        basic_salary: Any,
        deductions: Any = None,
        net_salary: Any = None,
        pay_date: Any,
    ) -> int:
        """Store one payroll entry.

        A supplied net_salary is kept as is, even if it disagrees with
        basic_salary - deductions. Only a missing one is calculated.
        """

        basic = require_amount(basic_salary, "basic_salary")
        deducted = optional_amount(deductions, "deductions") or Decimal("0")
        net = optional_amount(net_salary, "net_salary")
        if net is None:
            net = self._calculator.net_salary(basic_salary=basic, deductions=deducted)

        return self._payroll.create(
            employee_id=require_positive_int(employee_id, "employee_id"),
            basic_salary=basic,
            deductions=deducted,
            net_salary=net,
            pay_date=require_iso_date(pay_date, "pay_date"),
        )
