from __future__ import annotations

from dataclasses import dataclass

from .attendance.in_memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ANNUAL_LEAVE_DAYS, DEFAULT_MONTHLY_ALERT_DAY, DEFAULT_PAGE_SIZE
from .employees.in_memory_employee_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .leaves.in_memory_leave_repository import InMemoryLeaveRepository
from .leaves.service import LeaveService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceRepository
    leaves_repo: InMemoryLeaveRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService


def build_container(
    *,
    annual_leave_days: int = DEFAULT_ANNUAL_LEAVE_DAYS,
    monthly_alert_day: int = DEFAULT_MONTHLY_ALERT_DAY,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Container:
    employees_repo = InMemoryEmployeeRepository()
    attendance_repo = InMemoryAttendanceRepository()
    leaves_repo = InMemoryLeaveRepository()

    employee_service = EmployeeService(employees_repo, page_size=page_size)
    attendance_service = AttendanceService(
        attendance_repo,
        leaves_repo,
        annual_leave_days=annual_leave_days,
        monthly_alert_day=monthly_alert_day,
    )
    leave_service = LeaveService(leaves_repo)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
    )
