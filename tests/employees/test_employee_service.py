from __future__ import annotations

import pytest

from src.hr_dashboard.hr_dashboard.core.exceptions import NotFoundError, ValidationError
from src.hr_dashboard.hr_dashboard.database.store import FixtureStore
from src.hr_dashboard.hr_dashboard.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.hr_dashboard.hr_dashboard.employees.model import Employee
from src.hr_dashboard.hr_dashboard.employees.service import EmployeeForm, EmployeeService


def _valid_form(**overrides) -> EmployeeForm:
    data = {
        "name": "Naledi Khumalo",
        "position": "Data Analyst",
        "department": "IT",
        "salary": "61000",
        "contact": "naledi.khumalo@moderntech.com",
    }
    data.update(overrides)
    return EmployeeForm(**data)


@pytest.fixture
def service():
    return EmployeeService(InMemoryEmployeeRepository(FixtureStore.from_fixtures()))


def test_create_assigns_next_id_and_appends(service, fixed_today):
    before = list(service.list_all())

    emp = service.create(_valid_form())

    after = service.list_all()
    assert len(after) == len(before) + 1
    assert emp.employee_id == max(e.employee_id for e in before) + 1
    assert after[-1] == emp
    assert emp.salary == 61000
    assert emp.employment_history == "Joined in 2026"


@pytest.mark.parametrize("salary", ["0", "-1500", 0, -1, "nan", "inf", "-inf", float("nan")])
def test_create_rejects_non_positive_salary(service, salary):
    before = len(service.list_all())

    with pytest.raises(ValidationError) as exc:
        service.create(_valid_form(salary=salary))

    assert "salary" in exc.value.errors
    assert len(service.list_all()) == before


def test_create_collects_every_field_error(service):
    form = EmployeeForm(name=" ", position="", department="Legal", salary="abc", contact="not-an-email")

    with pytest.raises(ValidationError) as exc:
        service.create(form)

    assert set(exc.value.errors) == {"name", "position", "department", "salary", "contact"}
    assert exc.value.errors["contact"] == "Invalid email format"


def test_create_requires_contact(service):
    with pytest.raises(ValidationError) as exc:
        service.create(_valid_form(contact=""))
    assert exc.value.errors["contact"] == "Contact email is required"


def test_create_on_empty_collection_starts_at_one():
    service = EmployeeService(InMemoryEmployeeRepository(FixtureStore.from_fixtures(employees=[])))
    assert service.create(_valid_form()).employee_id == 1


def test_update_merges_fields_and_keeps_id(service):
    original = service.get(3)

    updated = service.update(3, EmployeeForm(position="Senior Quality Analyst", salary="59000"))

    assert updated.employee_id == 3
    assert updated.position == "Senior Quality Analyst"
    assert updated.salary == 59000
    assert updated.name == original.name
    assert service.get(3) == updated


def test_update_validates_merged_record(service):
    with pytest.raises(ValidationError):
        service.update(3, EmployeeForm(contact="broken@"))
    assert service.get(3).contact == "thabo.molefe@moderntech.com"


def test_update_unknown_id_raises(service):
    with pytest.raises(NotFoundError):
        service.update(999, _valid_form())


def test_delete_removes_exactly_one(service):
    before = len(service.list_all())

    assert service.delete(4) is True

    assert len(service.list_all()) == before - 1
    assert all(e.employee_id != 4 for e in service.list_all())


def test_delete_unknown_id_is_noop(service):
    before = list(service.list_all())

    assert service.delete(999) is False
    assert list(service.list_all()) == before


def test_search_matches_name_department_or_position_case_insensitively(service):
    assert [e.name for e in service.search("MARKETING")] == ["Charlize Venter", "Ayanda Mthembu"]
    assert [e.employee_id for e in service.search("engineer")] == [1, 7]
    assert [e.name for e in service.search("pillay")] == ["Shaun Pillay"]
    assert len(service.search("")) == len(service.list_all())
    assert service.search("  ") == []


def test_department_counts_keep_empty_department_as_own_group():
    store = FixtureStore.from_fixtures(
        employees=[
            Employee(1, "A", "Dev", "IT", 1, "", "a@x.io"),
            Employee(2, "B", "Dev", "", 1, "", "b@x.io"),
            Employee(3, "C", "Dev", "IT", 1, "", "c@x.io"),
        ]
    )
    service = EmployeeService(InMemoryEmployeeRepository(store))
    assert service.department_counts() == {"IT": 2, "": 1}
