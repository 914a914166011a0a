from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status of a single working day."""

    PRESENT = "Present"
    ABSENT = "Absent"


class LeaveStatus(str, Enum):
    """Status of the leave approval flow."""

    PENDING = "Pending"
    APPROVED = "Approved"
    DENIED = "Denied"
