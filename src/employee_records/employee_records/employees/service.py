from __future__ import annotations

import logging
import random
import string
import time
from collections import Counter
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import calculate_age, calculate_retirement_date, now_local
from ..common.validators import (
    EMAIL_RE,
    EMPLOYEE_NUMBER_RE,
    MOBILE_NUMBER_RE,
    FieldError,
    check_min_length,
    check_pattern,
)
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import Gender, SortDirection
from ..core.exceptions import ValidationError
from ..identity.nic import extract_birth_date, validate_nic
from .model import Employee, EmployeeFilter
from .query import Page, query_employees
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_uppercase


def generate_employee_number() -> str:
    """``EMP`` + last 6 digits of the ms timestamp + 3 random base-36 characters."""
    timestamp = str(int(time.time() * 1000))[-6:]
    suffix = "".join(random.choice(_BASE36) for _ in range(3))
    return f"EMP{timestamp}{suffix}"


@dataclass(frozen=True)
class NicDetails:
    """What the add-employee form fills in once a valid NIC is typed."""

    date_of_birth: date
    gender: Gender
    age: int
    retired_date: Optional[date]


def derive_from_nic(nic: str, *, today: Optional[date] = None) -> Optional[NicDetails]:
    info = validate_nic(nic, today=today)
    birth_date = extract_birth_date(nic, today=today)
    if not info.is_valid or birth_date is None or info.gender is None:
        return None
    return NicDetails(
        date_of_birth=birth_date,
        gender=info.gender,
        age=calculate_age(birth_date, today=today),
        retired_date=calculate_retirement_date(birth_date),
    )


def with_derived_dates(employee: Employee, *, today: Optional[date] = None) -> Employee:
    """Recompute ``age``/``retired_date`` from ``date_of_birth``."""
    if employee.date_of_birth is None:
        return replace(employee, age=None, retired_date=None)
    return replace(
        employee,
        age=calculate_age(employee.date_of_birth, today=today),
        retired_date=calculate_retirement_date(employee.date_of_birth),
    )


def validate_employee(employee: Employee) -> list[FieldError]:
    checks = [
        check_pattern(
            employee.employee_number,
            "employee_number",
            EMPLOYEE_NUMBER_RE,
            "Employee number must contain only letters and numbers",
        ),
        check_min_length(employee.full_name, "full_name", 2, "Full name is required (minimum 2 characters)"),
        check_pattern(employee.mobile_number, "mobile_number", MOBILE_NUMBER_RE, "Mobile number format: 012 345 6789"),
        check_pattern(employee.email_address, "email_address", EMAIL_RE, "Invalid email format"),
    ]
    errors = [e for e in checks if e is not None]
    if not validate_nic(employee.nic_number).is_valid:
        errors.append(FieldError("nic_number", "Valid NIC number is required"))
    return errors


class EmployeeService:
    """Use case: manage the employee directory (register, edit, soft-remove, list)."""

    def __init__(self, employees: EmployeeRepository, *, page_size: int = DEFAULT_PAGE_SIZE):
        self._employees = employees
        self._page_size = int(page_size)

    def register(self, employee: Employee, *, today: Optional[date] = None) -> Employee:
        if not employee.employee_number:
            employee = replace(employee, employee_number=generate_employee_number())

        details = derive_from_nic(employee.nic_number, today=today)
        if details is not None:
            employee = replace(
                employee,
                date_of_birth=employee.date_of_birth or details.date_of_birth,
                gender=employee.gender or details.gender,
            )

        errors = validate_employee(employee)
        if self._employees.get_by_number(employee.employee_number):
            errors.append(FieldError("employee_number", "Employee number already exists"))
        if errors:
            raise ValidationError("Employee data is invalid", errors)

        now = now_local()
        employee = with_derived_dates(employee, today=today)
        saved = self._employees.add(replace(employee, created_at=now, updated_at=now))
        logger.info(
            "employee registered",
            extra={"employee_id": saved.employee_id, "employee_number": saved.employee_number},
        )
        return saved

    def update(self, employee_id: str, *, today: Optional[date] = None, **changes) -> Optional[Employee]:
        current = self._employees.get_by_id(employee_id)
        if current is None:
            return None

        if "employee_number" in changes and changes["employee_number"] != current.employee_number:
            raise ValidationError(
                "Employee number cannot be changed",
                [FieldError("employee_number", "Employee number cannot be changed")],
            )
        for derived in ("employee_id", "age", "retired_date"):
            changes.pop(derived, None)

        updated = replace(current, **changes)
        errors = validate_employee(updated)
        if errors:
            raise ValidationError("Employee data is invalid", errors)

        if updated.date_of_birth != current.date_of_birth or updated.age is None:
            updated = with_derived_dates(updated, today=today)

        updated = replace(updated, updated_at=now_local())
        self._employees.save(updated)
        logger.info("employee updated", extra={"employee_id": employee_id, "fields": sorted(changes)})
        return updated

    def remove(self, employee_id: str) -> bool:
        """Soft removal: the record stays but drops out of active listings."""
        current = self._employees.get_by_id(employee_id)
        if current is None or not current.is_active:
            return False
        self._employees.save(replace(current, is_active=False, updated_at=now_local()))
        logger.info("employee removed", extra={"employee_id": employee_id})
        return True

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def get_by_number(self, employee_number: str) -> Optional[Employee]:
        return self._employees.get_by_number(employee_number)

    def list_active(self) -> list[Employee]:
        return [e for e in self._employees.list_all() if e.is_active]

    def list_page(
        self,
        *,
        filters: Optional[EmployeeFilter] = None,
        search_term: str = "",
        sort_by: str = "full_name",
        direction: SortDirection = SortDirection.ASC,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> Page:
        return query_employees(
            self.list_active(),
            filters=filters,
            search_term=search_term,
            sort_by=sort_by,
            direction=direction,
            page=page,
            page_size=page_size or self._page_size,
        )

    def unique_ministries(self) -> list[str]:
        return sorted({e.ministry.strip() for e in self.list_active() if e.ministry.strip()})

    def stats(self) -> dict:
        employees = self.list_active()
        ages = [e.age for e in employees if e.age is not None]
        return {
            "total": len(employees),
            "active": sum(1 for e in employees if e.status == "Active"),
            "confirmed": sum(1 for e in employees if e.service_confirmed),
            "by_designation": dict(Counter(e.designation.value for e in employees)),
            "by_gender": dict(Counter(e.gender.value for e in employees if e.gender)),
            "avg_age": round(sum(ages) / len(ages)) if ages else 0,
        }

