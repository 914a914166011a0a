from __future__ import annotations

from datetime import date

from src.hr_dashboard.hr_dashboard.container import build_container
from src.hr_dashboard.hr_dashboard.core.enums import LeaveStatus
from src.hr_dashboard.hr_dashboard.database.store import FixtureStore


def test_summary_over_fixtures(container):
    summary = container.dashboard_service.summary()

    assert summary.total_employees == 10
    assert summary.total_payroll == 632750
    assert summary.attendance_rate == 82
    assert summary.pending_leaves == 5
    assert summary.department_counts["Marketing"] == 2
    assert sum(summary.department_counts.values()) == 10
    assert summary.payroll_by_department["Marketing"] == 57850 + 56000
    assert len(summary.recent_leaves) == 5
    assert summary.recent_leaves[0].date == date(2025, 12, 5)


def test_summary_reflects_changes_after_recompute(container):
    container.employee_service.delete(1)
    container.attendance_service.approve_leave(employee_id=3, leave_date=date(2025, 12, 5))

    summary = container.dashboard_service.summary()

    assert summary.total_employees == 9
    assert summary.pending_leaves == 4
    # payroll total still counts the orphaned record; per-department view does not
    assert summary.total_payroll == 632750
    assert "Development" not in summary.payroll_by_department


def test_recent_limit_is_configurable():
    container = build_container(store=FixtureStore.from_fixtures(), recent_leaves=2)
    leaves = container.dashboard_service.summary().recent_leaves
    assert len(leaves) == 2
    assert all(item.status in set(LeaveStatus) for item in leaves)
