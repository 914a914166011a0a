from __future__ import annotations

import logging
from datetime import date

import pytest

from src.hr_dashboard.hr_dashboard.common.formatting import format_currency, format_deduction
from src.hr_dashboard.hr_dashboard.core.exceptions import NotFoundError
from src.hr_dashboard.hr_dashboard.database.store import FixtureStore
from src.hr_dashboard.hr_dashboard.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.hr_dashboard.hr_dashboard.employees.model import Employee
from src.hr_dashboard.hr_dashboard.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.hr_dashboard.hr_dashboard.payroll.memory_payroll_repository import InMemoryPayrollRepository
from src.hr_dashboard.hr_dashboard.payroll.model import MissingReference, PayrollRecord
from src.hr_dashboard.hr_dashboard.payroll.service import PayrollService


def _service(store: FixtureStore) -> PayrollService:
    return PayrollService(InMemoryPayrollRepository(store), InMemoryEmployeeRepository(store))


def _emp(emp_id: int, salary: float, department: str = "IT") -> Employee:
    return Employee(emp_id, f"Employee {emp_id}", "Engineer", department, salary, "", f"e{emp_id}@moderntech.com")


def test_join_shows_deduction_and_final_salary():
    store = FixtureStore.from_fixtures(
        employees=[_emp(1, 50000)],
        payroll=[PayrollRecord(employee_id=1, hours_worked=160, leave_deductions=16, final_salary=45000)],
    )

    line = _service(store).lines()[0]

    assert line.deduction_amount == 5000
    assert format_deduction(line.deduction_amount) == "-R5,000"
    assert format_currency(line.deduction_amount) == "R5,000"
    assert format_currency(line.final_salary) == "R45,000"
    assert line.name == "Employee 1"


def test_orphaned_record_is_skipped_and_logged(caplog):
    store = FixtureStore.from_fixtures(
        employees=[_emp(1, 50000)],
        payroll=[PayrollRecord(1, 160, 0, 50000), PayrollRecord(2, 150, 8, 30000)],
    )

    with caplog.at_level(logging.WARNING):
        result = _service(store).join()

    assert [line.employee_id for line in result.lines] == [1]
    assert result.missing == [MissingReference(record=PayrollRecord(2, 150, 8, 30000))]
    assert "unknown employee 2" in caplog.text


def test_deleting_employee_orphans_payroll_record():
    store = FixtureStore.from_fixtures()
    service = _service(store)
    InMemoryEmployeeRepository(store).delete_by_id(5)

    result = service.join()

    assert 5 not in [line.employee_id for line in result.lines]
    assert [m.employee_id for m in result.missing] == [5]
    with pytest.raises(NotFoundError):
        service.payslip(5)


def test_totals_are_plain_sums():
    totals = _service(FixtureStore.from_fixtures()).totals()

    assert totals.payroll == 632750
    assert totals.hours == 1623
    assert totals.deductions == 49


def test_search_by_name_or_department():
    service = _service(FixtureStore.from_fixtures())

    assert [line.name for line in service.search("finance")] == ["Shaun Pillay"]
    assert [line.employee_id for line in service.search("bo")] == [1, 3, 7]
    assert len(service.search("")) == 10


def test_payroll_by_department_sums_final_salary():
    store = FixtureStore.from_fixtures(
        employees=[_emp(1, 50000, "IT"), _emp(2, 40000, "HR"), _emp(3, 30000, "IT")],
        payroll=[PayrollRecord(1, 160, 0, 50000), PayrollRecord(3, 160, 0, 29000)],
    )
    assert _service(store).payroll_by_department() == {"IT": 79000}


def test_payslip_and_download_message(fixed_today):
    service = _service(FixtureStore.from_fixtures())

    slip = service.payslip(2)

    assert slip.line.name == "Lungile Moyo"
    assert slip.period == date(2026, 1, 15)
    assert slip.generated_on == date(2026, 1, 15)
    assert service.download_payslip(2) == "Payslip for Lungile Moyo has been downloaded."


def test_payslip_without_record_raises():
    with pytest.raises(NotFoundError):
        _service(FixtureStore.from_fixtures()).payslip(404)


def test_standard_calculator_never_goes_negative():
    calc = StandardPayrollCalculator()
    assert calc.deduction_amount(_emp(1, 50000), PayrollRecord(1, 160, 0, 52000)) == 0
    assert calc.deduction_amount(_emp(1, 50000), PayrollRecord(1, 160, 16, 45000)) == 5000
