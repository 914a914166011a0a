from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, no storage access here.
    """

    employee_id: int
    name: str
    position: str
    department: str
    salary: float
    employment_history: str
    contact: str
