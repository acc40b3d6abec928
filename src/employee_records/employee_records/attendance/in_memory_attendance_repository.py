from __future__ import annotations

from typing import Optional, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Dict-backed store; iteration follows insertion order of the records."""

    def __init__(self, records: Sequence[AttendanceRecord] = ()):
        self._by_key: dict[tuple[str, int, int], AttendanceRecord] = {}
        for record in records:
            self.save(record)

    @staticmethod
    def _key(employee_id: str, month: int, year: int) -> tuple[str, int, int]:
        return (str(employee_id), int(month), int(year))

    def get(self, employee_id: str, month: int, year: int) -> Optional[AttendanceRecord]:
        return self._by_key.get(self._key(employee_id, month, year))

    def save(self, record: AttendanceRecord) -> None:
        self._by_key[self._key(record.employee_id, record.month, record.year)] = record

    def list_for_month(self, month: int, year: int) -> Sequence[AttendanceRecord]:
        return [r for k, r in self._by_key.items() if k[1:] == (int(month), int(year))]

    def list_for_employee_year(self, employee_id: str, year: int) -> Sequence[AttendanceRecord]:
        return [r for k, r in self._by_key.items() if k[0] == str(employee_id) and k[2] == int(year)]

    def delete_month(self, month: int, year: int) -> int:
        keys = [k for k in self._by_key if k[1] == month and k[2] == year]
        for k in keys:
            del self._by_key[k]
        return len(keys)

    def any_for_month(self, month: int, year: int) -> bool:
        return any(r.month == month and r.year == year for r in self._by_key.values())
