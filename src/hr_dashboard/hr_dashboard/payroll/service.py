from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from ..common.datetime_utils import today_local
from ..common.queries import filter_by_text, sum_by, total
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import MissingReference, PayrollLine, PayrollRecord, Payslip
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JoinResult:
    lines: list[PayrollLine]
    missing: list[MissingReference] = field(default_factory=list)


@dataclass(frozen=True)
class PayrollTotals:
    payroll: float
    hours: float
    deductions: float


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()

    def resolve(self, record: PayrollRecord) -> Union[PayrollLine, MissingReference]:
        employee = self._employees.get_by_id(record.employee_id)
        if not employee:
            return MissingReference(record=record)
        return PayrollLine(
            record=record,
            employee=employee,
            deduction_amount=self._calculator.deduction_amount(employee, record),
        )

    def join(self) -> JoinResult:
        """Resolve every payroll record; orphans are reported separately and logged."""
        lines: list[PayrollLine] = []
        missing: list[MissingReference] = []

        for record in self._payroll.list_all():
            resolved = self.resolve(record)
            if isinstance(resolved, MissingReference):
                logger.warning("payroll record references unknown employee %s; skipped", record.employee_id)
                missing.append(resolved)
            else:
                lines.append(resolved)

        return JoinResult(lines=lines, missing=missing)

    def lines(self) -> list[PayrollLine]:
        return self.join().lines

    def search(self, query: str = "") -> list[PayrollLine]:
        return filter_by_text(self.lines(), query, "name", "department")

    def totals(self) -> PayrollTotals:
        # Sums over every record, resolved or not.
        records = self._payroll.list_all()
        return PayrollTotals(
            payroll=total(records, "final_salary"),
            hours=total(records, "hours_worked"),
            deductions=total(records, "leave_deductions"),
        )

    def payroll_by_department(self) -> dict[str, float]:
        return sum_by(self.lines(), "department", "final_salary")

    def payslip(self, employee_id: int) -> Payslip:
        record = self._payroll.get_for_employee(int(employee_id))
        if not record:
            raise NotFoundError("Payroll record not found")

        resolved = self.resolve(record)
        if isinstance(resolved, MissingReference):
            logger.warning("payslip requested for unknown employee %s", employee_id)
            raise NotFoundError("Employee not found")

        today = today_local()
        return Payslip(line=resolved, period=today, generated_on=today)

    def download_payslip(self, employee_id: int) -> str:
        """No file is produced; only the confirmation message is returned."""
        slip = self.payslip(employee_id)
        logger.info("payslip download requested for employee %s", employee_id)
        return f"Payslip for {slip.line.name} has been downloaded."
