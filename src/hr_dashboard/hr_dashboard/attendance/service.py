from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from ..common.queries import filter_by_text, percent
from ..core.enums import AttendanceStatus, LeaveStatus
from .model import EmployeeAttendance, LeaveQueueItem
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

DECISIONS = {LeaveStatus.APPROVED, LeaveStatus.DENIED}


def leave_queue_key(item: LeaveQueueItem):
    """Pending first, then most recent date first.

    Used with ``sorted`` (stable), so equal keys keep their source order.
    """
    return (0 if item.is_pending else 1, -item.date.toordinal())


def sort_leave_queue(items: Iterable[LeaveQueueItem]) -> list[LeaveQueueItem]:
    return sorted(items, key=leave_queue_key)


class AttendanceService:
    """Use case: attendance overview and leave review."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_sheets(self) -> list[EmployeeAttendance]:
        return list(self._attendance.list_all())

    def search(self, query: str = "") -> list[EmployeeAttendance]:
        return filter_by_text(self._attendance.list_all(), query, "name")

    def all_leave_requests(self) -> list[LeaveQueueItem]:
        """Every leave request across employees, in fixture order."""
        return [
            LeaveQueueItem(
                employee_id=sheet.employee_id,
                employee_name=sheet.name,
                date=leave.date,
                reason=leave.reason,
                status=leave.status,
            )
            for sheet in self._attendance.list_all()
            for leave in sheet.leave_requests
        ]

    def leave_queue(self) -> list[LeaveQueueItem]:
        return sort_leave_queue(self.all_leave_requests())

    def pending_leaves(self) -> list[LeaveQueueItem]:
        return [item for item in self.all_leave_requests() if item.is_pending]

    def recent_leaves(self, limit: int) -> list[LeaveQueueItem]:
        items = sorted(self.all_leave_requests(), key=lambda item: item.date, reverse=True)
        return items[:limit]

    def leave_counts(self) -> dict[LeaveStatus, int]:
        counts = {status: 0 for status in LeaveStatus}
        for item in self.all_leave_requests():
            counts[item.status] += 1
        return counts

    def attendance_rate(self) -> int:
        days = [day for sheet in self._attendance.list_all() for day in sheet.attendance]
        present = sum(1 for day in days if day.status == AttendanceStatus.PRESENT)
        return percent(present, len(days))

    def decide_leave(self, *, employee_id: int, leave_date: date, status: LeaveStatus) -> bool:
        """Pending -> Approved/Denied. Returns False (no change) for anything else."""
        if status not in DECISIONS:
            return False

        changed = self._attendance.set_leave_status(
            employee_id=int(employee_id),
            leave_date=leave_date,
            status=status,
            only_if=LeaveStatus.PENDING,
        )
        if changed:
            logger.info("leave %s/%s -> %s", employee_id, leave_date.isoformat(), status.value)
        else:
            logger.debug("no pending leave %s/%s to decide", employee_id, leave_date.isoformat())
        return changed

    def approve_leave(self, *, employee_id: int, leave_date: date) -> bool:
        return self.decide_leave(employee_id=employee_id, leave_date=leave_date, status=LeaveStatus.APPROVED)

    def deny_leave(self, *, employee_id: int, leave_date: date) -> bool:
        return self.decide_leave(employee_id=employee_id, leave_date=leave_date, status=LeaveStatus.DENIED)
