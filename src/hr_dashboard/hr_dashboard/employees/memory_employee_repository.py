from __future__ import annotations

from typing import Optional, Sequence

from ..database.store import FixtureStore
from .model import Employee


class InMemoryEmployeeRepository:
    """Employee collection held in the fixture store (list order is display order)."""

    def __init__(self, store: FixtureStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return tuple(self._store.employees)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        for emp in self._store.employees:
            if emp.employee_id == int(employee_id):
                return emp
        return None

    def next_id(self) -> int:
        ids = [emp.employee_id for emp in self._store.employees]
        return max(ids) + 1 if ids else 1

    def add(self, employee: Employee) -> Employee:
        self._store.employees.append(employee)
        return employee

    def replace(self, employee: Employee) -> bool:
        for i, emp in enumerate(self._store.employees):
            if emp.employee_id == employee.employee_id:
                self._store.employees[i] = employee
                return True
        return False

    def delete_by_id(self, employee_id: int) -> bool:
        before = len(self._store.employees)
        self._store.employees[:] = [e for e in self._store.employees if e.employee_id != int(employee_id)]
        return len(self._store.employees) < before
