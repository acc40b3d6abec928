from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import CentralProvincial, Designation, Gender, MaritalStatus, SalaryCode


@dataclass(frozen=True)
class Address:
    line1: str = ""
    line2: str = ""
    line3: str = ""


@dataclass(frozen=True)
class GradeAppointmentDates:
    """Sparse, ordered grade milestones (III → II → I → Supra)."""

    grade_iii: Optional[date] = None
    grade_ii: Optional[date] = None
    grade_i: Optional[date] = None
    grade_supra: Optional[date] = None

    def milestones(self) -> list[tuple[str, date]]:
        pairs = [
            ("grade_iii", self.grade_iii),
            ("grade_ii", self.grade_ii),
            ("grade_i", self.grade_i),
            ("grade_supra", self.grade_supra),
        ]
        return [(name, d) for name, d in pairs if d is not None]


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee identity and employment record.

    ``age`` and ``retired_date`` are derived from ``date_of_birth`` by the
    service layer; they are never edited on their own.
    """

    employee_number: str
    full_name: str
    designation: Designation
    nic_number: str
    employee_id: str = ""
    ministry: str = ""
    gender: Optional[Gender] = None
    date_of_birth: Optional[date] = None
    age: Optional[int] = None
    retired_date: Optional[date] = None
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    salary_code: Optional[SalaryCode] = None
    central_provincial: CentralProvincial = CentralProvincial.CENTRAL
    personal_address: Address = field(default_factory=Address)
    mobile_number: str = ""
    email_address: str = ""
    first_appointment_date: Optional[date] = None
    grade_appointment_date: GradeAppointmentDates = field(default_factory=GradeAppointmentDates)
    appointment_letter_no: str = ""
    increment_date: str = ""
    wop_number: str = ""
    educational_qualification: str = ""
    date_of_arrival_vds: Optional[date] = None
    date_of_transfer: Optional[date] = None
    status: str = "Active"
    eb_pass: bool = False
    service_confirmed: bool = False
    second_language_passed: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class AgeRange:
    min: int
    max: int


@dataclass(frozen=True)
class EmployeeFilter:
    employee_number: Optional[str] = None
    full_name: Optional[str] = None
    designation: Optional[Designation] = None
    ministry: Optional[str] = None
    nic_number: Optional[str] = None
    gender: Optional[Gender] = None
    salary_code: Optional[SalaryCode] = None
    age_range: Optional[AgeRange] = None
