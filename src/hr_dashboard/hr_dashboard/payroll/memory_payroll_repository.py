from __future__ import annotations

from typing import Optional, Sequence

from ..database.store import FixtureStore
from .model import PayrollRecord


class InMemoryPayrollRepository:
    def __init__(self, store: FixtureStore):
        self._store = store

    def list_all(self) -> Sequence[PayrollRecord]:
        return tuple(self._store.payroll)

    def get_for_employee(self, employee_id: int) -> Optional[PayrollRecord]:
        for record in self._store.payroll:
            if record.employee_id == int(employee_id):
                return record
        return None
