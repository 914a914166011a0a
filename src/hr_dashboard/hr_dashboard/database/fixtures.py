"""Static sample data for the dashboard (ModernTech Solutions)."""

from __future__ import annotations

from datetime import date

from ..attendance.model import AttendanceDay, EmployeeAttendance, LeaveRequest
from ..core.enums import AttendanceStatus, LeaveStatus
from ..employees.model import Employee
from ..payroll.model import PayrollRecord

P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT

WEEK = (date(2025, 7, 25), date(2025, 7, 26), date(2025, 7, 27), date(2025, 7, 28), date(2025, 7, 29))


def _days(*statuses: AttendanceStatus) -> tuple[AttendanceDay, ...]:
    return tuple(AttendanceDay(date=d, status=s) for d, s in zip(WEEK, statuses))


def _leave(day: date, reason: str, status: LeaveStatus) -> LeaveRequest:
    return LeaveRequest(date=day, reason=reason, status=status)


EMPLOYEES = [
    Employee(1, "Sibongile Nkosi", "Software Engineer", "Development", 70000, "Joined in 2015, promoted to Senior in 2018", "sibongile.nkosi@moderntech.com"),
    Employee(2, "Lungile Moyo", "HR Manager", "HR", 80000, "Joined in 2013, promoted to Manager in 2017", "lungile.moyo@moderntech.com"),
    Employee(3, "Thabo Molefe", "Quality Analyst", "QA", 55000, "Joined in 2018", "thabo.molefe@moderntech.com"),
    Employee(4, "Keabetswe Ndlovu", "Sales Representative", "Sales", 60000, "Joined in 2020", "keabetswe.ndlovu@moderntech.com"),
    Employee(5, "Charlize Venter", "Marketing Specialist", "Marketing", 58000, "Joined in 2019", "charlize.venter@moderntech.com"),
    Employee(6, "Praveen Naidoo", "UI/UX Designer", "Design", 65000, "Joined in 2016", "praveen.naidoo@moderntech.com"),
    Employee(7, "Bianca Botha", "DevOps Engineer", "IT", 72000, "Joined in 2017", "bianca.botha@moderntech.com"),
    Employee(8, "Ayanda Mthembu", "Content Strategist", "Marketing", 56000, "Joined in 2021", "ayanda.mthembu@moderntech.com"),
    Employee(9, "Shaun Pillay", "Accountant", "Finance", 62000, "Joined in 2018", "shaun.pillay@moderntech.com"),
    Employee(10, "Zanele Dlamini", "Customer Support Lead", "Support", 58000, "Joined in 2016", "zanele.dlamini@moderntech.com"),
]

ATTENDANCE = [
    EmployeeAttendance(
        1, "Sibongile Nkosi", _days(P, A, P, P, P),
        (_leave(date(2025, 7, 22), "Sick Leave", LeaveStatus.APPROVED),
         _leave(date(2025, 12, 1), "Personal", LeaveStatus.PENDING)),
    ),
    EmployeeAttendance(
        2, "Lungile Moyo", _days(P, P, A, P, P),
        (_leave(date(2025, 7, 15), "Family Responsibility", LeaveStatus.DENIED),
         _leave(date(2025, 12, 2), "Vacation", LeaveStatus.APPROVED)),
    ),
    EmployeeAttendance(
        3, "Thabo Molefe", _days(P, P, P, A, P),
        (_leave(date(2025, 7, 10), "Medical Appointment", LeaveStatus.APPROVED),
         _leave(date(2025, 12, 5), "Personal", LeaveStatus.PENDING)),
    ),
    EmployeeAttendance(
        4, "Keabetswe Ndlovu", _days(A, P, P, P, P),
        (_leave(date(2025, 7, 20), "Childcare", LeaveStatus.PENDING),),
    ),
    EmployeeAttendance(
        5, "Charlize Venter", _days(P, P, P, P, A),
        (_leave(date(2025, 7, 5), "Sick Leave", LeaveStatus.APPROVED),),
    ),
    EmployeeAttendance(
        6, "Praveen Naidoo", _days(P, P, A, P, P),
        (_leave(date(2025, 7, 12), "Bereavement", LeaveStatus.APPROVED),),
    ),
    EmployeeAttendance(
        7, "Bianca Botha", _days(P, P, P, P, P),
        (_leave(date(2025, 7, 30), "Personal", LeaveStatus.PENDING),),
    ),
    EmployeeAttendance(
        8, "Ayanda Mthembu", _days(P, A, P, P, P),
        (_leave(date(2025, 7, 18), "Medical Appointment", LeaveStatus.APPROVED),),
    ),
    EmployeeAttendance(
        9, "Shaun Pillay", _days(P, P, P, A, P),
        (_leave(date(2025, 7, 22), "Childcare", LeaveStatus.PENDING),),
    ),
    EmployeeAttendance(
        10, "Zanele Dlamini", _days(A, P, P, P, P),
        (_leave(date(2025, 7, 19), "Sick Leave", LeaveStatus.DENIED),),
    ),
]

PAYROLL = [
    PayrollRecord(1, 160, 8, 69500),
    PayrollRecord(2, 150, 10, 79000),
    PayrollRecord(3, 170, 4, 54800),
    PayrollRecord(4, 165, 6, 59700),
    PayrollRecord(5, 158, 5, 57850),
    PayrollRecord(6, 168, 2, 64800),
    PayrollRecord(7, 175, 3, 71800),
    PayrollRecord(8, 160, 0, 56000),
    PayrollRecord(9, 155, 5, 61500),
    PayrollRecord(10, 162, 6, 57800),
]
