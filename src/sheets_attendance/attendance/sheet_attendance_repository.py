from __future__ import annotations

from typing import Dict, Optional, Sequence

from ..core.constants import ATTENDANCE_COLUMNS, ATTENDANCE_TABLE
from ..core.enums import CheckOutStatus
from ..store.client import SheetStore
from ..store.sheet_base import row_number, write_cells
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: Dict[str, str], index: int) -> AttendanceRecord:
    return AttendanceRecord(
        date=r.get("Date", ""),
        name=r.get("Name", ""),
        position=r.get("Position", ""),
        check_in_time=r.get("CheckInTime", ""),
        check_in_status=r.get("CheckInStatus", ""),
        check_out_time=r.get("CheckOutTime", ""),
        check_out_status=r.get("CheckOutStatus", ""),
        check_in_photo_url=r.get("CheckInPhotoUrl", ""),
        check_out_photo_url=r.get("CheckOutPhotoUrl", ""),
        check_in_location=r.get("CheckInLocation", ""),
        check_out_location=r.get("CheckOutLocation", ""),
        work_duration=r.get("WorkDuration", ""),
        row_number=row_number(index),
    )


def _to_row(rec: AttendanceRecord) -> list:
    return [
        rec.date,
        rec.name,
        rec.position,
        rec.check_in_time,
        rec.check_in_status,
        rec.check_out_time,
        rec.check_out_status,
        rec.check_in_photo_url,
        rec.check_out_photo_url,
        rec.check_in_location,
        rec.check_out_location,
        rec.work_duration,
    ]


class SheetAttendanceRepository(AttendanceRepository):
    def __init__(self, store: SheetStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [_to_record(r, i) for i, r in enumerate(self._store.read_all(ATTENDANCE_TABLE))]

    def get_for_name_and_date(self, name: str, work_date: str) -> Optional[AttendanceRecord]:
        for rec in self.list_all():
            if rec.date == work_date and rec.name == name:
                return rec
        return None

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
        rec = AttendanceRecord(
            date=work_date,
            name=name,
            position=position,
            check_in_time=check_in_time,
            check_in_status=status,
            check_out_status=CheckOutStatus.PENDING.value,
            check_in_photo_url=photo_url,
            check_in_location=location,
        )
        self._store.append(ATTENDANCE_TABLE, _to_row(rec))
        return rec

    def update_checkout(
        self,
        *,
        row_number: int,
        check_out_time: str,
        photo_url: str,
        location: str,
        work_duration: str,
    ) -> None:
        write_cells(
            self._store,
            ATTENDANCE_TABLE,
            ATTENDANCE_COLUMNS,
            row_number,
            [
                ("CheckOutTime", check_out_time),
                ("CheckOutStatus", CheckOutStatus.PRESENT.value),
                ("CheckOutPhotoUrl", photo_url),
                ("CheckOutLocation", location),
                ("WorkDuration", work_duration),
            ],
        )

    def create_leave_day(self, *, work_date: str, name: str, position: str, leave_type: str) -> AttendanceRecord:
        rec = AttendanceRecord(
            date=work_date,
            name=name,
            position=position,
            check_in_status=leave_type,
            check_out_status=CheckOutStatus.LEAVE.value,
        )
        self._store.append(ATTENDANCE_TABLE, _to_row(rec))
        return rec

    def mark_leave(self, *, row_number: int, leave_type: str) -> None:
        write_cells(
            self._store,
            ATTENDANCE_TABLE,
            ATTENDANCE_COLUMNS,
            row_number,
            [
                ("CheckInStatus", leave_type),
                ("CheckOutStatus", CheckOutStatus.LEAVE.value),
            ],
        )
