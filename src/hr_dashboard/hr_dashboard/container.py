from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .core.constants import DEFAULT_RECENT_LEAVES
from .dashboard.service import DashboardService
from .database.store import FixtureStore
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .payroll.memory_payroll_repository import InMemoryPayrollRepository
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    store: FixtureStore

    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceRepository
    payroll_repo: InMemoryPayrollRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    dashboard_service: DashboardService


def build_container(*, store: Optional[FixtureStore] = None, recent_leaves: int = DEFAULT_RECENT_LEAVES) -> Container:
    store = store or FixtureStore.from_fixtures()

    employees_repo = InMemoryEmployeeRepository(store)
    attendance_repo = InMemoryAttendanceRepository(store)
    payroll_repo = InMemoryPayrollRepository(store)

    auth_service = AuthService()
    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo)
    payroll_service = PayrollService(payroll_repo, employees_repo)
    dashboard_service = DashboardService(
        employee_service,
        attendance_service,
        payroll_service,
        recent_limit=recent_leaves,
    )

    return Container(
        store=store,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        payroll_repo=payroll_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        dashboard_service=dashboard_service,
    )
