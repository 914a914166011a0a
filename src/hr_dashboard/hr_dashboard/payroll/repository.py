from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def list_all(self) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def get_for_employee(self, employee_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError
