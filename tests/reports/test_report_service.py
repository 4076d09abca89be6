from __future__ import annotations

import pytest

from sheets_attendance.attendance.service import AttendanceService
from sheets_attendance.attendance.sheet_attendance_repository import SheetAttendanceRepository
from sheets_attendance.core.constants import ATTENDANCE_TABLE, MONTHLY_RECAP_TABLE
from sheets_attendance.core.exceptions import ValidationError
from sheets_attendance.reports.service import AttendanceReportService
from sheets_attendance.reports.sheet_recap_repository import SheetMonthlyRecapRepository


def _service(store) -> AttendanceReportService:
    attendance = AttendanceService(SheetAttendanceRepository(store), enforce_gates=False)
    return AttendanceReportService(attendance, SheetMonthlyRecapRepository(store))


def test_history_summary_counts(store):
    rows = store.tables[ATTENDANCE_TABLE]
    rows.append(["2026-02-02", "Alice", "Engineer", "08:05", "On Time", "17:00", "Present"])
    rows.append(["2026-02-03", "Alice", "Engineer", "08:20", "Late", "17:00", "Present"])
    rows.append(["2026-02-04", "Alice", "Engineer", "08:40", "Very Late", "", "Pending"])
    rows.append(["2026-02-05", "Alice", "Engineer", "", "Sick Leave", "", "Leave"])
    rows.append(["2026-02-06", "Alice", "Engineer", "08:01", "On Time", "17:00", "Present"])
    rows.append(["2026-02-06", "Bob", "Accountant", "08:01", "On Time", "17:00", "Present"])

    summary = _service(store).history_summary("Alice")

    assert (summary.on_time, summary.late, summary.very_late, summary.leave) == (2, 1, 1, 1)
    assert len(summary.rows) == 5


def test_monthly_recap_filters_month(store):
    store.tables[MONTHLY_RECAP_TABLE] = [
        ["Month", "Name", "Present", "Late"],
        ["2026-01", "Alice", "20", "1"],
        ["2026-02", "Alice", "18", "2"],
        ["2026-02", "Bob", "19", "0"],
    ]

    recap = _service(store).monthly_recap("2026-02")

    assert [r["Name"] for r in recap] == ["Alice", "Bob"]
    assert recap[0]["Present"] == "18"


@pytest.mark.parametrize("month", ["2026-13", "2026-2", "", "Feb"])
def test_monthly_recap_validates_month(store, month):
    with pytest.raises(ValidationError):
        _service(store).monthly_recap(month)
