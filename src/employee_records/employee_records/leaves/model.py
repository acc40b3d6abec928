from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveApplication:
    """A leave request over ``start_date..end_date`` (inclusive, ``dd-MM-yyyy``).

    Audit fields are only filled when the application leaves ``pending``.
    """

    application_id: str
    employee_id: str
    employee_number: str
    leave_type: LeaveType
    start_date: str
    end_date: str
    total_days: float
    reason: str
    applied_date: str
    status: RequestStatus = RequestStatus.PENDING
    is_half_day: bool = False
    approved_by: Optional[str] = None
    approved_date: Optional[str] = None
    rejected_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewLeaveApplication:
    employee_id: str
    employee_number: str
    leave_type: LeaveType
    start_date: str
    end_date: str
    reason: str
    is_half_day: bool = False
