from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import EmployeeAttendance


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[EmployeeAttendance]:
        raise NotImplementedError

    def get_for_employee(self, employee_id: int) -> Optional[EmployeeAttendance]:
        raise NotImplementedError

    def set_leave_status(
        self,
        *,
        employee_id: int,
        leave_date: date,
        status: LeaveStatus,
        only_if: LeaveStatus,
    ) -> bool:
        """Change the status of one leave request if it currently equals ``only_if``."""

        raise NotImplementedError
