from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..employees.model import Employee


@dataclass(frozen=True)
class PayrollRecord:
    employee_id: int
    hours_worked: float
    leave_deductions: float
    final_salary: float


@dataclass(frozen=True)
class PayrollLine:
    """Read-model: a payroll record joined with its employee."""

    record: PayrollRecord
    employee: Employee
    deduction_amount: float

    @property
    def employee_id(self) -> int:
        return self.record.employee_id

    @property
    def name(self) -> str:
        return self.employee.name

    @property
    def department(self) -> str:
        return self.employee.department

    @property
    def base_salary(self) -> float:
        return self.employee.salary

    @property
    def hours_worked(self) -> float:
        return self.record.hours_worked

    @property
    def leave_deductions(self) -> float:
        return self.record.leave_deductions

    @property
    def final_salary(self) -> float:
        return self.record.final_salary


@dataclass(frozen=True)
class MissingReference:
    """A payroll record whose employee id resolves to no employee."""

    record: PayrollRecord

    @property
    def employee_id(self) -> int:
        return self.record.employee_id


@dataclass(frozen=True)
class Payslip:
    line: PayrollLine
    period: date
    generated_on: date
