from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from ..database.store import FixtureStore
from .model import EmployeeAttendance


class InMemoryAttendanceRepository:
    def __init__(self, store: FixtureStore):
        self._store = store

    def list_all(self) -> Sequence[EmployeeAttendance]:
        return tuple(self._store.attendance)

    def get_for_employee(self, employee_id: int) -> Optional[EmployeeAttendance]:
        for sheet in self._store.attendance:
            if sheet.employee_id == int(employee_id):
                return sheet
        return None

    def set_leave_status(
        self,
        *,
        employee_id: int,
        leave_date: date,
        status: LeaveStatus,
        only_if: LeaveStatus,
    ) -> bool:
        for i, sheet in enumerate(self._store.attendance):
            if sheet.employee_id != int(employee_id):
                continue

            leaves = list(sheet.leave_requests)
            for j, leave in enumerate(leaves):
                if leave.date == leave_date and leave.status == only_if:
                    leaves[j] = replace(leave, status=status)
                    self._store.attendance[i] = replace(sheet, leave_requests=tuple(leaves))
                    return True
            return False
        return False
