from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import RequestStatus
from .model import LeaveApplication
from .repository import LeaveRepository


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self, applications: Sequence[LeaveApplication] = ()):
        self._next_id = 1
        self._by_id: dict[str, LeaveApplication] = {}
        for app in applications:
            self.save(app)

    def next_id(self) -> str:
        while str(self._next_id) in self._by_id:
            self._next_id += 1
        rid = str(self._next_id)
        self._next_id += 1
        return rid

    def get(self, application_id: str) -> Optional[LeaveApplication]:
        return self._by_id.get(str(application_id))

    def save(self, application: LeaveApplication) -> None:
        self._by_id[application.application_id] = application

    def list_applications(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveApplication]:
        items = list(self._by_id.values())
        if status is not None:
            items = [a for a in items if a.status == status]
        if employee_id is not None:
            items = [a for a in items if a.employee_id == employee_id]
        return items

    def delete(self, application_ids: Sequence[str]) -> int:
        removed = 0
        for rid in application_ids:
            if self._by_id.pop(str(rid), None) is not None:
                removed += 1
        return removed
