from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus, LeaveStatus


@dataclass(frozen=True)
class AttendanceDay:
    """One attendance day of an employee."""

    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class LeaveRequest:
    date: date
    reason: str
    status: LeaveStatus


@dataclass(frozen=True)
class EmployeeAttendance:
    """Attendance sheet of one employee (days + leave requests, fixture order)."""

    employee_id: int
    name: str
    attendance: tuple[AttendanceDay, ...]
    leave_requests: tuple[LeaveRequest, ...]

    @property
    def present_days(self) -> int:
        return sum(1 for d in self.attendance if d.status == AttendanceStatus.PRESENT)

    @property
    def absent_days(self) -> int:
        return sum(1 for d in self.attendance if d.status == AttendanceStatus.ABSENT)


@dataclass(frozen=True)
class LeaveQueueItem:
    """Read-model: a leave request tagged with its employee, for the review queue."""

    employee_id: int
    employee_name: str
    date: date
    reason: str
    status: LeaveStatus

    @property
    def is_pending(self) -> bool:
        return self.status == LeaveStatus.PENDING
