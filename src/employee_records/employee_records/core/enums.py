from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class NICFormat(str, Enum):
    """Which NIC layout a number was recognised as."""

    OLD = "old"
    NEW = "new"
    INVALID = "invalid"


class Designation(str, Enum):
    DISTRICT_OFFICER = "District Officer"
    ASST_DISTRICT_OFFICER = "Asst.District Officer"
    MANAGEMENT_SERVICE_OFFICER = "Management Service Officer"
    DEVELOPMENT_OFFICER = "Development Officer"
    EXTENSION_OFFICER = "Extension officer"
    OFFICE_EMPLOYEE_SERVICE = "Office employee service"
    GARDEN_LABOUR = "Garden labour"


class SalaryCode(str, Enum):
    M1 = "M1"
    M2 = "M2"
    M3 = "M3"
    A1 = "A1"
    A2 = "A2"
    B3 = "B3"
    C3 = "C3"
    C4 = "C4"


class MaritalStatus(str, Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    DIVORCED = "Divorced"
    WIDOWED = "Widowed"


class CentralProvincial(str, Enum):
    CENTRAL = "Central"
    PROVINCIAL = "Provincial"


class AttendanceStatus(str, Enum):
    """Status recorded for one day of attendance.

    ``is_leave`` is resolved from ``_LEAVE_STATUSES`` instead of matching on the name.
    """

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    LEAVE = "leave"
    SICK_LEAVE = "sick-leave"
    CASUAL_LEAVE = "casual-leave"
    ANNUAL_LEAVE = "annual-leave"
    EMERGENCY_LEAVE = "emergency-leave"
    MATERNITY_LEAVE = "maternity-leave"
    PATERNITY_LEAVE = "paternity-leave"

    @property
    def is_leave(self) -> bool:
        return self in _LEAVE_STATUSES


_LEAVE_STATUSES = frozenset(
    {
        AttendanceStatus.LEAVE,
        AttendanceStatus.SICK_LEAVE,
        AttendanceStatus.CASUAL_LEAVE,
        AttendanceStatus.ANNUAL_LEAVE,
        AttendanceStatus.EMERGENCY_LEAVE,
        AttendanceStatus.MATERNITY_LEAVE,
        AttendanceStatus.PATERNITY_LEAVE,
    }
)


class LeaveType(str, Enum):
    """Leave categories an application can request (also tallied in monthly summaries)."""

    SICK_LEAVE = "sick-leave"
    CASUAL_LEAVE = "casual-leave"
    ANNUAL_LEAVE = "annual-leave"
    EMERGENCY_LEAVE = "emergency-leave"
    MATERNITY_LEAVE = "maternity-leave"
    PATERNITY_LEAVE = "paternity-leave"


class RequestStatus(str, Enum):
    """Approval workflow state of a leave application."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
