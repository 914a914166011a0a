from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import Employee
from ..model import PayrollRecord


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def deduction_amount(self, employee: Employee, record: PayrollRecord) -> float:
        raise NotImplementedError
