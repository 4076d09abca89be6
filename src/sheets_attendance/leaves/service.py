from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_iso_date
from ..common.locking import KeyedLock
from ..common.validators import require_choice, require_non_empty
from ..core.enums import ApprovalStatus, LeaveAction, LeaveType, Role
from ..core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    PartialWriteError,
    StoreError,
)
from ..employees.model import Identity
from .model import LeaveRequest
from .repository import LeaveRequestRepository

logger = logging.getLogger(__name__)

DECISION_COLUMNS = ["ApprovalStatus", "ApprovedBy"]
LEAVE_STATUS_COLUMNS = ["CheckInStatus", "CheckOutStatus"]


class LeaveService:
    """Leave submission and approval, with the write-through into Attendance.

    ``overwrite_on_approval`` (default True) approves a leave even when the
    employee already checked in that day, replacing the row's status cells.
    With False such an approval is refused with a ConflictError.
    """

    def __init__(
        self,
        leaves: LeaveRequestRepository,
        attendance: AttendanceRepository,
        *,
        locks: Optional[KeyedLock] = None,
        overwrite_on_approval: bool = True,
    ):
        self._leaves = leaves
        self._attendance = attendance
        self._locks = locks if locks is not None else KeyedLock()
        self._overwrite_on_approval = bool(overwrite_on_approval)

    def submit(self, identity: Identity, *, work_date: str, leave_type: str, reason: str) -> LeaveRequest:
        if identity.role != Role.EMPLOYEE:
            raise AuthorizationError("Only employees can request leave")

        work_date = (work_date or "").strip()
        parse_iso_date(work_date)
        leave_type = require_choice(leave_type, LeaveType, "Leave type")
        reason = require_non_empty(reason, "Reason")

        req = self._leaves.create(
            work_date=work_date,
            name=identity.name,
            position=identity.position,
            leave_type=leave_type.value,
            reason=reason,
        )
        logger.info("%s requested %s on %s", identity.name, req.leave_type, work_date)
        return req

    def list_pending(self) -> List[LeaveRequest]:
        return [r for r in self._leaves.list_all() if r.is_pending]

    def list_for_employee(self, name: str) -> List[LeaveRequest]:
        return [r for r in self._leaves.list_all() if r.name == name]

    def process(self, work_date: str, name: str, action, approver: Identity) -> LeaveRequest:
        """Approve or reject the first Pending request for (date, name).

        When no request is Pending but an earlier call with the same action
        stopped half way (ApprovedBy missing, or an approval without its leave
        row in Attendance), that request is finished instead.
        """
        if approver.role != Role.SECURITY:
            raise AuthorizationError("Only security personnel can process leave requests")

        action = require_choice(action, LeaveAction, "Action")
        approve = action == LeaveAction.APPROVE
        status = ApprovalStatus.APPROVED if approve else ApprovalStatus.REJECTED

        with self._locks.hold((work_date, name)):
            request = self._leaves.find_pending(work_date=work_date, name=name)
            if not request:
                request = self._find_unfinished(work_date, name, status)
                if not request:
                    raise NotFoundError("Leave request not found or already processed")
                logger.warning("Finishing %s leave of %s on %s", status.value.lower(), name, work_date)

            if approve and not self._overwrite_on_approval:
                existing = self._attendance.get_for_name_and_date(name, work_date)
                if existing and existing.checked_in and not existing.on_leave:
                    raise ConflictError(
                        f"{name} already checked in on {work_date}",
                        reason="CheckedInOnLeaveDay",
                    )

            if request.is_pending or not request.approved_by:
                self._leaves.decide(row_number=request.row_number, status=status, approved_by=approver.name)
                request = replace(request, approval_status=status.value, approved_by=approver.name)

            if approve:
                try:
                    self._reconcile_attendance(request)
                except StoreError as e:
                    written = DECISION_COLUMNS + (e.written if isinstance(e, PartialWriteError) else [])
                    pending = e.pending if isinstance(e, PartialWriteError) else LEAVE_STATUS_COLUMNS
                    logger.error("Leave for %s on %s decided but attendance not updated: %s", name, work_date, e)
                    raise PartialWriteError(
                        f"Leave request approved but attendance for {name} on {work_date} was not updated",
                        written=written,
                        pending=pending,
                        status=e.status,
                    ) from e

        logger.info("%s %s leave of %s on %s", approver.name, status.value.lower(), name, work_date)
        return request

    def _find_unfinished(self, work_date: str, name: str, status: ApprovalStatus) -> Optional[LeaveRequest]:
        for req in self._leaves.list_all():
            if req.date != work_date or req.name != name or req.approval_status != status.value:
                continue
            if not req.approved_by:
                return req
            if status == ApprovalStatus.APPROVED:
                record = self._attendance.get_for_name_and_date(name, work_date)
                if not record or not record.on_leave:
                    return req
        return None

    def _reconcile_attendance(self, request: LeaveRequest) -> None:
        record = self._attendance.get_for_name_and_date(request.name, request.date)
        if not record:
            self._attendance.create_leave_day(
                work_date=request.date,
                name=request.name,
                position=request.position,
                leave_type=request.leave_type,
            )
            return

        if record.checked_in:
            logger.warning(
                "Approved leave overwrites attendance of %s on %s (checked in at %s)",
                request.name, request.date, record.check_in_time,
            )
        self._attendance.mark_leave(row_number=record.row_number, leave_type=request.leave_type)
