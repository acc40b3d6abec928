from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Storage for monthly attendance records, keyed by (employee_id, month, year)."""

    def get(self, employee_id: str, month: int, year: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> None:
        """Insert or replace the record with the same (employee_id, month, year)."""

        raise NotImplementedError

    def list_for_month(self, month: int, year: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee_year(self, employee_id: str, year: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def delete_month(self, month: int, year: int) -> int:
        """Remove every record of that month; returns how many were removed."""

        raise NotImplementedError

    def any_for_month(self, month: int, year: int) -> bool:
        raise NotImplementedError
