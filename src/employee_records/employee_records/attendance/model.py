from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, LeaveType


@dataclass(frozen=True)
class DailyAttendance:
    """One day of one employee's month; ``date`` is the day of month."""

    date: int
    status: AttendanceStatus
    notes: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: all marked days of one employee for one month.

    ``entries`` keeps insertion order and holds at most one entry per day.
    The record does not store a leave balance: it is derived per year from
    ``leave_days_taken`` by ``AttendanceService.get_leave_balance`` and
    returned alongside the record by ``get_attendance_with_balance``.
    """

    employee_id: str
    month: int
    year: int
    entries: tuple[DailyAttendance, ...] = ()
    employee_number: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def entry_for(self, day: int) -> Optional[DailyAttendance]:
        for entry in self.entries:
            if entry.date == day:
                return entry
        return None

    def count(self, status: AttendanceStatus) -> int:
        return sum(1 for e in self.entries if e.status == status)

    @property
    def leave_days_taken(self) -> int:
        return sum(1 for e in self.entries if e.status.is_leave)


@dataclass(frozen=True)
class MonthlyAttendanceSummary:
    """Read-model derived from one AttendanceRecord; never stored."""

    employee_id: str
    employee_number: str
    month: int
    year: int
    total_working_days: int
    total_present: int
    total_absent: int
    total_half_days: int
    total_leaves: int
    leave_breakdown: dict[LeaveType, int] = field(default_factory=dict)
    attendance_percentage: int = 0
