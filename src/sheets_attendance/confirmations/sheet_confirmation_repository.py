from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import CONFIRMATIONS_TABLE
from ..store.client import SheetStore
from ..store.sheet_base import row_number
from .model import SecurityConfirmation
from .repository import ConfirmationRepository


class SheetConfirmationRepository(ConfirmationRepository):
    def __init__(self, store: SheetStore):
        self._store = store

    def list_all(self) -> Sequence[SecurityConfirmation]:
        return [
            SecurityConfirmation(
                date=r.get("Date", ""),
                security_name=r.get("SecurityName", ""),
                employee_name=r.get("EmployeeName", ""),
                position=r.get("Position", ""),
                confirmation_time=r.get("ConfirmationTime", ""),
                row_number=row_number(i),
            )
            for i, r in enumerate(self._store.read_all(CONFIRMATIONS_TABLE))
        ]

    def find(self, *, date: str, employee_name: str) -> Optional[SecurityConfirmation]:
        for c in self.list_all():
            if c.date == date and c.employee_name == employee_name:
                return c
        return None

    def create(
        self,
        *,
        date: str,
        security_name: str,
        employee_name: str,
        position: str,
        confirmation_time: str,
    ) -> SecurityConfirmation:
        self._store.append(
            CONFIRMATIONS_TABLE,
            [date, security_name, employee_name, position, confirmation_time],
        )
        return SecurityConfirmation(
            date=date,
            security_name=security_name,
            employee_name=employee_name,
            position=position,
            confirmation_time=confirmation_time,
        )
