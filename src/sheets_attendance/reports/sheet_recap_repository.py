from __future__ import annotations

from typing import Dict, Sequence

from ..core.constants import MONTHLY_RECAP_TABLE
from ..store.client import SheetStore
from .repository import MonthlyRecapRepository


class SheetMonthlyRecapRepository(MonthlyRecapRepository):
    def __init__(self, store: SheetStore):
        self._store = store

    def list_for_month(self, month: str) -> Sequence[Dict[str, str]]:
        return [dict(r) for r in self._store.read_all(MONTHLY_RECAP_TABLE) if r.get("Month", "") == month]
