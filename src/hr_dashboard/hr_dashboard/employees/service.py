from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.queries import count_by, filter_by_text
from ..common.validators import (
    parse_number,
    require_choice,
    require_email,
    require_non_empty,
    require_positive,
)
from ..core.constants import DEPARTMENTS
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeForm:
    """Raw values submitted by the employee dialog (all optional on update)."""

    name: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[object] = None
    contact: Optional[str] = None
    employment_history: Optional[str] = None

    @classmethod
    def from_mapping(cls, data) -> "EmployeeForm":
        return cls(
            name=data.get("name"),
            position=data.get("position"),
            department=data.get("department"),
            salary=data.get("salary"),
            contact=data.get("contact"),
            employment_history=data.get("employment_history"),
        )


class EmployeeService:
    """Use case: manage employee records (create/update/delete/search)."""

    def __init__(self, employees: EmployeeRepository, *, departments: Sequence[str] = DEPARTMENTS):
        self._employees = employees
        self._departments = tuple(departments)

    @property
    def departments(self) -> tuple[str, ...]:
        return self._departments

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: int) -> Employee:
        emp = self._employees.get_by_id(int(employee_id))
        if not emp:
            raise NotFoundError("Employee not found")
        return emp

    def search(self, query: str = "") -> list[Employee]:
        return filter_by_text(self._employees.list_all(), query, "name", "department", "position")

    def department_counts(self) -> dict[str, int]:
        return count_by(self._employees.list_all(), "department")

    def _validated(self, *, name, position, department, salary, contact) -> dict:
        errors: dict[str, str] = {}
        values: dict = {}

        def check(field, fn):
            try:
                values[field] = fn()
            except ValidationError as e:
                errors[field] = str(e)

        check("name", lambda: require_non_empty(name, "Name"))
        check("position", lambda: require_non_empty(position, "Position"))
        check("department", lambda: require_choice(department, "Department", self._departments))
        check("salary", lambda: require_positive(parse_number(salary, "Salary"), "Salary"))
        check("contact", lambda: require_email(contact, "Contact email"))

        if errors:
            raise ValidationError("Please correct the highlighted fields", errors=errors)
        return values

    def create(self, form: EmployeeForm) -> Employee:
        values = self._validated(
            name=form.name,
            position=form.position,
            department=form.department,
            salary=form.salary,
            contact=form.contact,
        )
        history = (form.employment_history or "").strip() or f"Joined in {today_local().year}"

        employee = Employee(
            employee_id=self._employees.next_id(),
            name=values["name"],
            position=values["position"],
            department=values["department"],
            salary=values["salary"],
            employment_history=history,
            contact=values["contact"],
        )
        self._employees.add(employee)
        logger.info("employee %s added (%s)", employee.employee_id, employee.name)
        return employee

    def update(self, employee_id: int, form: EmployeeForm) -> Employee:
        current = self.get(employee_id)

        def pick(new, old):
            return old if new is None else new

        values = self._validated(
            name=pick(form.name, current.name),
            position=pick(form.position, current.position),
            department=pick(form.department, current.department),
            salary=pick(form.salary, current.salary),
            contact=pick(form.contact, current.contact),
        )
        history = pick(form.employment_history, current.employment_history)

        updated = replace(current, employment_history=history, **values)
        if not self._employees.replace(updated):
            raise NotFoundError("Employee not found")
        logger.info("employee %s updated", updated.employee_id)
        return updated

    def delete(self, employee_id: int) -> bool:
        """Remove one employee; unknown ids are a no-op. Dependent records are kept."""
        deleted = self._employees.delete_by_id(int(employee_id))
        if deleted:
            logger.info("employee %s deleted", employee_id)
        return deleted
