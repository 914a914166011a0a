from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import EmployeeAttendance
from ..employees.model import Employee
from ..payroll.model import PayrollRecord
from . import fixtures


@dataclass
class FixtureStore:
    """Mutable in-memory collections shared by the repositories.

    Nothing is persisted: a new store (or a process restart) starts again from
    the fixtures.
    """

    employees: list[Employee] = field(default_factory=list)
    attendance: list[EmployeeAttendance] = field(default_factory=list)
    payroll: list[PayrollRecord] = field(default_factory=list)

    @classmethod
    def from_fixtures(
        cls,
        *,
        employees: Optional[list[Employee]] = None,
        attendance: Optional[list[EmployeeAttendance]] = None,
        payroll: Optional[list[PayrollRecord]] = None,
    ) -> "FixtureStore":
        return cls(
            employees=copy.deepcopy(list(fixtures.EMPLOYEES if employees is None else employees)),
            attendance=copy.deepcopy(list(fixtures.ATTENDANCE if attendance is None else attendance)),
            payroll=copy.deepcopy(list(fixtures.PAYROLL if payroll is None else payroll)),
        )
