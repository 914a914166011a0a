from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import LeaveQueueItem
from ..attendance.service import AttendanceService
from ..core.constants import DEFAULT_RECENT_LEAVES
from ..core.enums import LeaveStatus
from ..employees.service import EmployeeService
from ..payroll.service import PayrollService


@dataclass(frozen=True)
class DashboardSummary:
    total_employees: int
    total_payroll: float
    attendance_rate: int
    pending_leaves: int
    department_counts: dict[str, int]
    payroll_by_department: dict[str, float]
    recent_leaves: list[LeaveQueueItem]


class DashboardService:
    """Aggregates the headline figures shown on the dashboard."""

    def __init__(
        self,
        employees: EmployeeService,
        attendance: AttendanceService,
        payroll: PayrollService,
        *,
        recent_limit: int = DEFAULT_RECENT_LEAVES,
    ):
        self._employees = employees
        self._attendance = attendance
        self._payroll = payroll
        self._recent_limit = recent_limit

    def summary(self) -> DashboardSummary:
        return DashboardSummary(
            total_employees=len(self._employees.list_all()),
            total_payroll=self._payroll.totals().payroll,
            attendance_rate=self._attendance.attendance_rate(),
            pending_leaves=self._attendance.leave_counts()[LeaveStatus.PENDING],
            department_counts=self._employees.department_counts(),
            payroll_by_department=self._payroll.payroll_by_department(),
            recent_leaves=self._attendance.recent_leaves(self._recent_limit),
        )
