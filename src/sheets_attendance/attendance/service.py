from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from ..common.datetime_utils import (
    attendance_status,
    can_check_out,
    current_date,
    current_time,
    now_local,
    work_duration,
)
from ..common.locking import KeyedLock
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.enums import CheckOutStatus, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError
from ..confirmations.service import ConfirmationService
from ..employees.model import Identity
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in/check-out state machine over the Attendance sheet.

    Per (date, name): no record -> checked in -> checked out. The
    confirmation and check-out time gates are enforced here as well as in the
    UI unless the service is built with ``enforce_gates=False``.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        confirmations: Optional[ConfirmationService] = None,
        *,
        locks: Optional[KeyedLock] = None,
        enforce_gates: bool = True,
    ):
        if enforce_gates and confirmations is None:
            raise ValueError("confirmations is required when gates are enforced")
        self._attendance = attendance
        self._confirmations = confirmations
        self._locks = locks if locks is not None else KeyedLock()
        self._enforce_gates = bool(enforce_gates)

    @staticmethod
    def _require_employee(identity: Identity) -> None:
        if identity.role != Role.EMPLOYEE:
            raise AuthorizationError("Only employees can record attendance")

    def check_in(
        self,
        identity: Identity,
        *,
        photo_url: str,
        location: str,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        self._require_employee(identity)
        now = now or now_local()
        today = current_date(now)
        time_ = current_time(now)

        if self._enforce_gates and not self._confirmations.is_confirmed(today, identity.name):
            raise ConflictError("Security has not confirmed your attendance today", reason="NotConfirmed")

        with self._locks.hold((today, identity.name)):
            existing = self._attendance.get_for_name_and_date(identity.name, today)
            if existing and existing.on_leave:
                raise ConflictError("Approved leave is recorded for today", reason="OnLeave")
            if existing and existing.checked_in:
                raise ConflictError("Already checked in today", reason="AlreadyCheckedIn")

            status = attendance_status(time_)
            record = self._attendance.create_checkin(
                work_date=today,
                name=identity.name,
                position=identity.position,
                check_in_time=time_,
                status=status.value,
                photo_url=photo_url or "",
                location=location or "",
            )

        logger.info("%s checked in at %s on %s (%s)", identity.name, time_, today, status.value)
        return record

    def check_out(
        self,
        identity: Identity,
        *,
        photo_url: str,
        location: str,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Close today's check-in row.

        The row is looked up by the date of ``now``, so a shift that crosses
        midnight cannot be closed after 00:00: its row carries the previous date.
        """
        self._require_employee(identity)
        now = now or now_local()
        today = current_date(now)
        time_ = current_time(now)

        if self._enforce_gates and not can_check_out(now):
            raise ConflictError("Check-out is only allowed from 17:00", reason="TooEarly")

        with self._locks.hold((today, identity.name)):
            record = self._attendance.get_for_name_and_date(identity.name, today)
            if not record or not record.checked_in:
                raise NotFoundError("No check-in record found for today")
            if record.on_leave:
                raise ConflictError("Approved leave is recorded for today", reason="OnLeave")
            if record.checked_out:
                raise ConflictError("Already checked out today", reason="AlreadyCheckedOut")

            duration = work_duration(record.check_in_time, time_)
            self._attendance.update_checkout(
                row_number=record.row_number,
                check_out_time=time_,
                photo_url=photo_url or "",
                location=location or "",
                work_duration=duration,
            )

        logger.info("%s checked out at %s on %s (%s)", identity.name, time_, today, duration)
        return replace(
            record,
            check_out_time=time_,
            check_out_status=CheckOutStatus.PRESENT.value,
            check_out_photo_url=photo_url or "",
            check_out_location=location or "",
            work_duration=duration,
        )

    def today_record(self, identity: Identity, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_name_and_date(identity.name, current_date(now or now_local()))

    def history(self, name: str, *, days: int = DEFAULT_HISTORY_DAYS) -> List[AttendanceRecord]:
        """Most recent records of one employee, newest date first."""
        rows = [r for r in self._attendance.list_all() if r.name == name]
        rows.sort(key=lambda r: r.date, reverse=True)
        return rows[: max(int(days), 0)]
