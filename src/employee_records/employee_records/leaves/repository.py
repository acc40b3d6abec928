from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import LeaveApplication


class LeaveRepository(Protocol):
    def next_id(self) -> str:
        raise NotImplementedError

    def get(self, application_id: str) -> Optional[LeaveApplication]:
        raise NotImplementedError

    def save(self, application: LeaveApplication) -> None:
        """Insert or replace by ``application_id``."""

        raise NotImplementedError

    def list_applications(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[LeaveApplication]:
        raise NotImplementedError

    def delete(self, application_ids: Sequence[str]) -> int:
        raise NotImplementedError
