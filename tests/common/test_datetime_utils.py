from datetime import datetime, time

import pytest

from sheets_attendance.common.datetime_utils import (
    attendance_status,
    can_check_out,
    current_date,
    current_time,
    is_within_confirmation_window,
    parse_hhmm,
    work_duration,
    work_duration_minutes,
)
from sheets_attendance.core.enums import CheckInStatus
from sheets_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "check_in, expected",
    [
        ("06:30", CheckInStatus.ON_TIME),
        ("08:05", CheckInStatus.ON_TIME),
        ("08:10", CheckInStatus.ON_TIME),
        ("08:11", CheckInStatus.LATE),
        ("08:15", CheckInStatus.LATE),
        ("08:30", CheckInStatus.LATE),
        ("08:31", CheckInStatus.VERY_LATE),
        ("08:45", CheckInStatus.VERY_LATE),
        ("13:00", CheckInStatus.VERY_LATE),
    ],
)
def test_attendance_status_bands(check_in, expected):
    assert attendance_status(check_in) == expected


def test_attendance_status_accepts_time_objects():
    assert attendance_status(time(8, 10, 59)) == CheckInStatus.ON_TIME


def test_work_duration_same_day():
    assert work_duration("09:00", "17:30") == "8 hours 30 minutes"


def test_work_duration_rolls_over_midnight():
    assert work_duration("23:50", "00:10") == "0 hours 20 minutes"


@pytest.mark.parametrize("check_in, check_out", [("22:00", "06:15"), ("17:01", "17:00"), ("00:01", "00:00")])
def test_work_duration_never_negative(check_in, check_out):
    assert work_duration_minutes(check_in, check_out) > 0


def test_work_duration_equal_times_is_zero():
    assert work_duration("08:00", "08:00") == "0 hours 0 minutes"


@pytest.mark.parametrize(
    "hh, mm, expected",
    [(5, 59, False), (6, 0, True), (7, 30, True), (8, 59, True), (9, 0, False), (17, 0, False)],
)
def test_confirmation_window(hh, mm, expected):
    assert is_within_confirmation_window(datetime(2026, 2, 2, hh, mm)) is expected


@pytest.mark.parametrize("hh, mm, expected", [(16, 59, False), (17, 0, True), (23, 59, True), (0, 0, False)])
def test_can_check_out(hh, mm, expected):
    assert can_check_out(datetime(2026, 2, 2, hh, mm)) is expected


def test_current_date_and_time_format():
    now = datetime(2026, 3, 4, 7, 5, 59)
    assert current_date(now) == "2026-03-04"
    assert current_time(now) == "07:05"


@pytest.mark.parametrize("bad", ["", "8", "25:00", "08:61", "ab:cd"])
def test_parse_hhmm_rejects_malformed(bad):
    with pytest.raises(ValidationError):
        parse_hhmm(bad)
