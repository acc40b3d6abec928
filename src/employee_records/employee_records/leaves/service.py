from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import (
    format_date_for_display,
    get_date_range_in_days,
    is_valid_date_range,
    now_local,
    validate_date_format,
)
from ..common.validators import FieldError
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from .model import LeaveApplication, NewLeaveApplication
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

EDITABLE_LEAVE_FIELDS = frozenset({"leave_type", "start_date", "end_date", "reason", "is_half_day"})


def calculate_total_days(start_date: str, end_date: str, is_half_day: bool = False) -> float:
    """Calendar days in the inclusive range, halved for half-day leave; 0 for a bad range."""
    if not start_date or not end_date or not is_valid_date_range(start_date, end_date):
        return 0
    days = get_date_range_in_days(start_date, end_date)
    return days * 0.5 if is_half_day else days


def validate_leave_request(request: NewLeaveApplication) -> list[FieldError]:
    errors: list[FieldError] = []
    if not request.employee_id:
        errors.append(FieldError("employee_id", "Please select an employee."))
    start_ok = validate_date_format(request.start_date)
    end_ok = validate_date_format(request.end_date)
    if not start_ok:
        errors.append(FieldError("start_date", "Please enter a valid start date."))
    if not end_ok:
        errors.append(FieldError("end_date", "Please enter a valid end date."))
    if start_ok and end_ok and not is_valid_date_range(request.start_date, request.end_date):
        errors.append(FieldError("end_date", "End date must be after start date."))
    if not (request.reason or "").strip():
        errors.append(FieldError("reason", "Please provide a reason for leave."))
    return errors


class LeaveService:
    """Use cases around leave applications: submit, approve, reject, list.

    Approval is a one-way state machine: ``pending`` moves to ``approved`` or
    ``rejected`` and stays there. A transition on a missing or already decided
    application changes nothing and returns False.
    """

    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def submit_leave(self, request: NewLeaveApplication, *, today: Optional[date] = None) -> LeaveApplication:
        errors = validate_leave_request(request)
        if errors:
            raise ValidationError("Leave application is invalid", errors)

        now = now_local()
        application = LeaveApplication(
            application_id=self._leaves.next_id(),
            employee_id=request.employee_id,
            employee_number=request.employee_number,
            leave_type=request.leave_type,
            start_date=request.start_date,
            end_date=request.end_date,
            total_days=calculate_total_days(request.start_date, request.end_date, request.is_half_day),
            reason=request.reason.strip(),
            applied_date=format_date_for_display(today or now.date()),
            is_half_day=request.is_half_day,
            created_at=now,
            updated_at=now,
        )
        self._leaves.save(application)
        logger.info(
            "leave application submitted",
            extra={"application_id": application.application_id, "employee_id": application.employee_id},
        )
        return application

    def _pending(self, application_id: str) -> Optional[LeaveApplication]:
        application = self._leaves.get(application_id)
        if application is None:
            logger.warning("leave application not found", extra={"application_id": application_id})
            return None
        if application.status != RequestStatus.PENDING:
            logger.warning(
                "leave application already decided",
                extra={"application_id": application_id, "status": application.status.value},
            )
            return None
        return application

    def approve(self, application_id: str, approved_by: str, *, today: Optional[date] = None) -> bool:
        application = self._pending(application_id)
        if application is None:
            return False

        self._leaves.save(
            replace(
                application,
                status=RequestStatus.APPROVED,
                approved_by=approved_by,
                approved_date=format_date_for_display(today or now_local().date()),
                updated_at=now_local(),
            )
        )
        logger.info("leave application approved", extra={"application_id": application_id})
        return True

    def reject(self, application_id: str, reason: str) -> bool:
        application = self._pending(application_id)
        if application is None:
            return False

        self._leaves.save(
            replace(
                application,
                status=RequestStatus.REJECTED,
                rejected_reason=reason,
                updated_at=now_local(),
            )
        )
        logger.info("leave application rejected", extra={"application_id": application_id})
        return True

    def update_leave_application(self, application_id: str, **changes) -> Optional[LeaveApplication]:
        """Edit a pending application under the same rules as a new one.

        Only the request fields can change; ``total_days`` follows the dates.
        """
        application = self._pending(application_id)
        if application is None:
            return None

        not_editable = sorted(changes.keys() - EDITABLE_LEAVE_FIELDS)
        if not_editable:
            raise ValidationError(
                "Leave application fields cannot be edited",
                [FieldError(name, "This field cannot be edited.") for name in not_editable],
            )

        updated = replace(application, **changes)
        errors = validate_leave_request(
            NewLeaveApplication(
                employee_id=updated.employee_id,
                employee_number=updated.employee_number,
                leave_type=updated.leave_type,
                start_date=updated.start_date,
                end_date=updated.end_date,
                reason=updated.reason,
                is_half_day=updated.is_half_day,
            )
        )
        if errors:
            raise ValidationError("Leave application is invalid", errors)

        updated = replace(
            updated,
            reason=updated.reason.strip(),
            total_days=calculate_total_days(updated.start_date, updated.end_date, updated.is_half_day),
            updated_at=now_local(),
        )
        self._leaves.save(updated)
        logger.info("leave application updated", extra={"application_id": application_id, "fields": sorted(changes)})
        return updated

    def get(self, application_id: str) -> Optional[LeaveApplication]:
        return self._leaves.get(application_id)

    def get_pending_leave_applications(self) -> Sequence[LeaveApplication]:
        return self._leaves.list_applications(status=RequestStatus.PENDING)

    def get_leave_applications_for_employee(self, employee_id: str) -> Sequence[LeaveApplication]:
        return self._leaves.list_applications(employee_id=employee_id)
