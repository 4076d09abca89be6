from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from ..attendance.model import AttendanceRecord
from ..attendance.service import AttendanceService
from ..common.validators import require_month
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.enums import CheckInStatus, CheckOutStatus
from .repository import MonthlyRecapRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistorySummary:
    rows: List[AttendanceRecord]
    on_time: int
    late: int
    very_late: int
    leave: int


class AttendanceReportService:
    def __init__(self, attendance: AttendanceService, recaps: MonthlyRecapRepository):
        self._attendance = attendance
        self._recaps = recaps

    def history_summary(self, name: str, *, days: int = DEFAULT_HISTORY_DAYS) -> HistorySummary:
        rows = self._attendance.history(name, days=days)

        counts = {status: 0 for status in CheckInStatus}
        leave = 0
        for r in rows:
            # Leave rows carry the leave type in CheckInStatus.
            if r.check_out_status == CheckOutStatus.LEAVE.value or r.check_in_status == CheckInStatus.LEAVE.value:
                leave += 1
                continue
            try:
                counts[CheckInStatus(r.check_in_status)] += 1
            except ValueError:
                logger.debug("Skipping unknown check-in status %r for %s", r.check_in_status, name)

        return HistorySummary(
            rows=rows,
            on_time=counts[CheckInStatus.ON_TIME],
            late=counts[CheckInStatus.LATE],
            very_late=counts[CheckInStatus.VERY_LATE],
            leave=leave,
        )

    def monthly_recap(self, month: str) -> List[Dict[str, str]]:
        month = require_month(month)
        return list(self._recaps.list_for_month(month))
