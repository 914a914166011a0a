from __future__ import annotations

from .base import PayrollCalculator
from ...employees.model import Employee
from ..model import PayrollRecord


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base salary - final salary, not below 0."""

    def deduction_amount(self, employee: Employee, record: PayrollRecord) -> float:
        return max(employee.salary - record.final_salary, 0)
