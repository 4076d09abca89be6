from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from ..core.constants import (
    CHECKOUT_ALLOWED_FROM,
    CONFIRMATION_WINDOW_END,
    CONFIRMATION_WINDOW_START,
    LATE_UNTIL,
    ON_TIME_UNTIL,
)
from ..core.enums import CheckInStatus
from ..core.exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

TimeLike = Union[time, str]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def current_date(now: Optional[datetime] = None) -> str:
    """Calendar date as stored in the sheets (YYYY-MM-DD)."""
    return (now or now_local()).strftime(DATE_FORMAT)


def current_time(now: Optional[datetime] = None) -> str:
    """24-hour clock time as stored in the sheets (HH:MM)."""
    return (now or now_local()).strftime(TIME_FORMAT)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: TimeLike) -> time:
    """Parse HH:MM into a time; time objects pass through (seconds dropped)."""
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    try:
        return datetime.strptime((value or "").strip(), TIME_FORMAT).time()
    except ValueError:
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def attendance_status(check_in: TimeLike) -> CheckInStatus:
    t = parse_hhmm(check_in)
    if t <= ON_TIME_UNTIL:
        return CheckInStatus.ON_TIME
    if t <= LATE_UNTIL:
        return CheckInStatus.LATE
    return CheckInStatus.VERY_LATE


def work_duration_minutes(check_in: TimeLike, check_out: TimeLike) -> int:
    """Minutes between two times of day.

    A check-out earlier than the check-in is taken as the next calendar day.
    Only the arithmetic rolls over: AttendanceService.check_out finds rows by
    the current date, so an overnight row is never closed through it.
    """
    anchor = date(2000, 1, 1)
    start = datetime.combine(anchor, parse_hhmm(check_in))
    end = datetime.combine(anchor, parse_hhmm(check_out))
    if end < start:
        end += timedelta(days=1)
    return int((end - start).total_seconds() // 60)


def format_duration(minutes: int) -> str:
    return f"{minutes // 60} hours {minutes % 60} minutes"


def work_duration(check_in: TimeLike, check_out: TimeLike) -> str:
    return format_duration(work_duration_minutes(check_in, check_out))


def is_within_confirmation_window(now: Optional[datetime] = None) -> bool:
    t = (now or now_local()).time()
    return CONFIRMATION_WINDOW_START <= t < CONFIRMATION_WINDOW_END


def can_check_out(now: Optional[datetime] = None) -> bool:
    return (now or now_local()).time() >= CHECKOUT_ALLOWED_FROM
