from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CheckOutStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one row of the Attendance sheet, keyed by (date, name).

    Times are HH:MM strings as stored; an empty string means "not yet".
    ``check_in_status`` holds the leave type on leave days.
    ``row_number`` is the sheet row at the time of the read that produced it.
    """

    date: str
    name: str
    position: str
    check_in_time: str = ""
    check_in_status: str = ""
    check_out_time: str = ""
    check_out_status: str = ""
    check_in_photo_url: str = ""
    check_out_photo_url: str = ""
    check_in_location: str = ""
    check_out_location: str = ""
    work_duration: str = ""
    row_number: int = 0

    @property
    def checked_in(self) -> bool:
        return bool(self.check_in_time)

    @property
    def checked_out(self) -> bool:
        return bool(self.check_out_time)

    @property
    def on_leave(self) -> bool:
        return self.check_out_status == CheckOutStatus.LEAVE.value
