from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional, Sequence, Union

from ..common.datetime_utils import get_days_in_month, now_local, parse_date, today_local
from ..core.constants import DEFAULT_ANNUAL_LEAVE_DAYS, DEFAULT_MONTHLY_ALERT_DAY
from ..core.enums import AttendanceStatus, LeaveType
from ..leaves.repository import LeaveRepository
from .model import AttendanceRecord, DailyAttendance, MonthlyAttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _coerce_status(status: Union[AttendanceStatus, str]) -> Optional[AttendanceStatus]:
    try:
        return AttendanceStatus(status)
    except ValueError:
        return None


def attendance_percentage(present: int, half_days: int, total_working_days: int) -> int:
    """Whole percent of working days attended, half days counting 0.5 (halves round up)."""
    if total_working_days <= 0:
        return 0
    return int(math.floor((present + half_days * 0.5) / total_working_days * 100 + 0.5))


class AttendanceService:
    """Attendance ledger: per-employee monthly records and the aggregates built on them.

    Month and year are always passed explicitly. Leave balance is derived from the
    leave days recorded for the year, so rewriting a day can never count twice.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        leaves: LeaveRepository | None = None,
        *,
        annual_leave_days: int = DEFAULT_ANNUAL_LEAVE_DAYS,
        monthly_alert_day: int = DEFAULT_MONTHLY_ALERT_DAY,
    ):
        self._attendance = attendance
        self._leaves = leaves
        self._annual_leave_days = int(annual_leave_days)
        self._monthly_alert_day = int(monthly_alert_day)

    def get_attendance_for_employee(self, employee_id: str, month: int, year: int) -> Optional[AttendanceRecord]:
        return self._attendance.get(employee_id, month, year)

    def mark_attendance(
        self,
        employee_id: str,
        month: int,
        year: int,
        day: int,
        status: Union[AttendanceStatus, str],
        notes: Optional[str] = None,
        *,
        employee_number: str = "",
    ) -> Optional[AttendanceRecord]:
        """Upsert one day. Returns the updated record, or None for an impossible day/status."""
        resolved = _coerce_status(status)
        if resolved is None or not 1 <= month <= 12 or not 1 <= day <= get_days_in_month(month, year):
            logger.warning(
                "attendance mark rejected",
                extra={"employee_id": employee_id, "month": month, "year": year, "day": day, "status": str(status)},
            )
            return None

        now = now_local()
        record = self._attendance.get(employee_id, month, year)
        if record is None:
            record = AttendanceRecord(
                employee_id=employee_id,
                month=month,
                year=year,
                employee_number=employee_number,
                created_at=now,
            )

        entry = DailyAttendance(date=day, status=resolved, notes=notes)
        if record.entry_for(day) is not None:
            entries = tuple(entry if e.date == day else e for e in record.entries)
        else:
            entries = record.entries + (entry,)

        record = replace(record, entries=entries, updated_at=now)
        self._attendance.save(record)
        logger.info(
            "attendance marked",
            extra={"employee_id": employee_id, "month": month, "year": year, "day": day, "status": resolved.value},
        )
        return record

    def set_month_records(
        self,
        employee_id: str,
        month: int,
        year: int,
        entries: Iterable[DailyAttendance],
        *,
        employee_number: str = "",
    ) -> AttendanceRecord:
        """Replace a whole month's entries at once (later duplicates of a day win)."""
        by_day: dict[int, DailyAttendance] = {}
        for entry in entries:
            by_day[entry.date] = entry

        now = now_local()
        record = self._attendance.get(employee_id, month, year) or AttendanceRecord(
            employee_id=employee_id,
            month=month,
            year=year,
            employee_number=employee_number,
            created_at=now,
        )
        record = replace(record, entries=tuple(by_day.values()), updated_at=now)
        self._attendance.save(record)
        return record

    def get_leave_balance(self, employee_id: str, year: int) -> int:
        taken = sum(r.leave_days_taken for r in self._attendance.list_for_employee_year(employee_id, year))
        return max(0, self._annual_leave_days - taken)

    def get_attendance_with_balance(
        self, employee_id: str, month: int, year: int
    ) -> Optional[tuple[AttendanceRecord, int]]:
        """The month's record with the year's remaining leave, or None if nothing is marked."""
        record = self._attendance.get(employee_id, month, year)
        if record is None:
            return None
        return record, self.get_leave_balance(employee_id, year)

    def get_monthly_attendance_summary(
        self, employee_id: str, month: int, year: int
    ) -> Optional[MonthlyAttendanceSummary]:
        record = self._attendance.get(employee_id, month, year)
        if record is None:
            return None
        return self._summarize(record)

    def get_all_monthly_summaries(self, month: int, year: int) -> Sequence[MonthlyAttendanceSummary]:
        return [self._summarize(r) for r in self._attendance.list_for_month(month, year)]

    @staticmethod
    def _summarize(record: AttendanceRecord) -> MonthlyAttendanceSummary:
        total_working_days = get_days_in_month(record.month, record.year)
        present = record.count(AttendanceStatus.PRESENT)
        half_days = record.count(AttendanceStatus.HALF_DAY)

        breakdown = {lt: record.count(AttendanceStatus(lt.value)) for lt in LeaveType}

        return MonthlyAttendanceSummary(
            employee_id=record.employee_id,
            employee_number=record.employee_number,
            month=record.month,
            year=record.year,
            total_working_days=total_working_days,
            total_present=present,
            total_absent=record.count(AttendanceStatus.ABSENT),
            total_half_days=half_days,
            total_leaves=record.leave_days_taken,
            leave_breakdown=breakdown,
            attendance_percentage=attendance_percentage(present, half_days, total_working_days),
        )

    def should_show_monthly_alert(self, *, today: Optional[date] = None) -> bool:
        """Late-month reminder: past the alert day and this month already has data."""
        today = today or today_local()
        if today.day <= self._monthly_alert_day:
            return False
        return self._attendance.any_for_month(today.month, today.year)

    def clear_monthly_data(self, month: int, year: int) -> None:
        """Drop a month's attendance records and the leave applications applied in it."""
        removed_records = self._attendance.delete_month(month, year)

        removed_leaves = 0
        if self._leaves is not None:
            ids = []
            for app in self._leaves.list_applications():
                applied = parse_date(app.applied_date)
                if applied and applied.month == month and applied.year == year:
                    ids.append(app.application_id)
            removed_leaves = self._leaves.delete(ids)

        logger.info(
            "monthly data cleared",
            extra={"month": month, "year": year, "records": removed_records, "leave_applications": removed_leaves},
        )
