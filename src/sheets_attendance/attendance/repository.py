from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_name_and_date(self, name: str, work_date: str) -> Optional[AttendanceRecord]:
        """First row for (date, name) in table order, addressed from a fresh read."""

        raise NotImplementedError

    def create_checkin(
        self,
        *,
        work_date: str,
        name: str,
        position: str,
        check_in_time: str,
        status: str,
        photo_url: str,
        location: str,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update_checkout(
        self,
        *,
        row_number: int,
        check_out_time: str,
        photo_url: str,
        location: str,
        work_duration: str,
    ) -> None:
        """Cell-by-cell; may raise PartialWriteError."""

        raise NotImplementedError

    def create_leave_day(self, *, work_date: str, name: str, position: str, leave_type: str) -> AttendanceRecord:
        raise NotImplementedError

    def mark_leave(self, *, row_number: int, leave_type: str) -> None:
        """Overwrite CheckInStatus/CheckOutStatus only; other cells untouched."""

        raise NotImplementedError
