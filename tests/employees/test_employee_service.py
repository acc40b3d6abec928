from __future__ import annotations

import re
from datetime import date

import pytest

from src.employee_records.employee_records.core.enums import Designation, Gender
from src.employee_records.employee_records.core.exceptions import ValidationError
from src.employee_records.employee_records.employees.in_memory_employee_repository import (
    InMemoryEmployeeRepository,
)
from src.employee_records.employee_records.employees.model import Employee, EmployeeFilter
from src.employee_records.employee_records.employees.service import (
    EmployeeService,
    derive_from_nic,
    generate_employee_number,
    validate_employee,
)

TODAY = date(2026, 10, 19)


def new_employee(**overrides) -> Employee:
    data = dict(
        employee_number="",
        full_name="Kamal Perera",
        designation=Designation.DEVELOPMENT_OFFICER,
        nic_number="851234567V",
        ministry="Health",
        mobile_number="071 234 5678",
        email_address="kamal@example.lk",
    )
    data.update(overrides)
    return Employee(**data)


def make_service() -> EmployeeService:
    return EmployeeService(InMemoryEmployeeRepository(), page_size=25)


def test_generated_employee_number_shape():
    assert re.match(r"^EMP\d{6}[0-9A-Z]{3}$", generate_employee_number())


def test_register_fills_number_and_nic_details():
    svc = make_service()

    saved = svc.register(new_employee(), today=TODAY)

    assert re.match(r"^EMP\d{6}[0-9A-Z]{3}$", saved.employee_number)
    assert saved.employee_id
    assert saved.date_of_birth == date(1985, 5, 3)
    assert saved.gender == Gender.MALE
    assert saved.age == 41
    assert saved.retired_date == date(2045, 5, 3)
    assert svc.get(saved.employee_id) == saved
    assert svc.get_by_number(saved.employee_number) == saved


def test_register_rejects_duplicate_number():
    svc = make_service()
    svc.register(new_employee(employee_number="EMP001"), today=TODAY)

    with pytest.raises(ValidationError) as exc:
        svc.register(new_employee(employee_number="EMP001", full_name="Someone Else"), today=TODAY)

    assert [e.field for e in exc.value.errors] == ["employee_number"]


def test_register_rejects_invalid_nic_and_contact_details():
    svc = make_service()

    with pytest.raises(ValidationError) as exc:
        svc.register(
            new_employee(nic_number="12345", mobile_number="0712345678", email_address="nope"),
            today=TODAY,
        )

    fields = {e.field for e in exc.value.errors}
    assert fields == {"nic_number", "mobile_number", "email_address"}
    assert svc.list_active() == []


def test_validate_employee_checks_number_and_name():
    errors = validate_employee(new_employee(employee_number="emp-1", full_name="K"))

    assert {e.field for e in errors} == {"employee_number", "full_name"}


def test_update_with_new_birth_date_recomputes_age_and_retirement():
    svc = make_service()
    saved = svc.register(new_employee(employee_number="EMP001"), today=TODAY)

    updated = svc.update(saved.employee_id, today=TODAY, date_of_birth=date(1970, 1, 15), age=99)

    assert updated.age == 56
    assert updated.retired_date == date(2030, 1, 15)
    assert svc.get(saved.employee_id) == updated


def test_update_cannot_change_employee_number():
    svc = make_service()
    saved = svc.register(new_employee(employee_number="EMP001"), today=TODAY)

    with pytest.raises(ValidationError):
        svc.update(saved.employee_id, employee_number="EMP002")

    assert svc.update("missing", full_name="Nobody") is None


def test_remove_is_soft_and_happens_once():
    svc = make_service()
    saved = svc.register(new_employee(employee_number="EMP001"), today=TODAY)

    assert svc.remove(saved.employee_id) is True
    assert svc.remove(saved.employee_id) is False
    assert svc.list_active() == []
    assert svc.get(saved.employee_id).is_active is False


def test_listing_ministries_and_stats_ignore_removed_employees():
    svc = make_service()
    a = svc.register(new_employee(employee_number="EMP001", ministry="Health "), today=TODAY)
    svc.register(
        new_employee(employee_number="EMP002", full_name="Nirmala Silva", nic_number="199562304567", ministry="Education"),
        today=TODAY,
    )
    removed = svc.register(new_employee(employee_number="EMP003", ministry="Finance"), today=TODAY)
    svc.update(a.employee_id, service_confirmed=True)
    svc.remove(removed.employee_id)

    assert svc.unique_ministries() == ["Education", "Health"]

    stats = svc.stats()
    assert stats["total"] == 2
    assert stats["active"] == 2
    assert stats["confirmed"] == 1
    assert stats["by_gender"] == {"Male": 1, "Female": 1}
    assert stats["by_designation"] == {"Development Officer": 2}

    page = svc.list_page(filters=EmployeeFilter(gender=Gender.FEMALE))
    assert [e.employee_number for e in page.items] == ["EMP002"]
    assert page.page_size == 25


def test_derive_from_nic():
    details = derive_from_nic("199562304567", today=TODAY)

    assert details.gender == Gender.FEMALE
    assert details.date_of_birth == date(1995, 5, 3)
    assert details.age == 31
    assert derive_from_nic("bad", today=TODAY) is None


def test_register_keeps_explicit_birth_date():
    svc = make_service()

    saved = svc.register(new_employee(employee_number="EMP001", date_of_birth=date(1985, 5, 4)), today=TODAY)

    assert saved.date_of_birth == date(1985, 5, 4)
    assert saved.age == 41


def test_grade_milestones_skip_missing_grades():
    from src.employee_records.employee_records.employees.model import GradeAppointmentDates

    grades = GradeAppointmentDates(grade_iii=date(2010, 1, 1), grade_i=date(2020, 6, 1))

    assert grades.milestones() == [("grade_iii", date(2010, 1, 1)), ("grade_i", date(2020, 6, 1))]


def test_far_future_nic_year_registers_without_retirement_date():
    svc = make_service()

    saved = svc.register(new_employee(employee_number="EMP009", nic_number="999512345678"), today=TODAY)

    assert saved.date_of_birth == date(9995, 4, 5)
    assert saved.retired_date is None
    assert derive_from_nic("999512345678", today=TODAY).retired_date is None
