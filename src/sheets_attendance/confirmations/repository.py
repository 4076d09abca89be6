from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SecurityConfirmation


class ConfirmationRepository(Protocol):
    def list_all(self) -> Sequence[SecurityConfirmation]:
        raise NotImplementedError

    def find(self, *, date: str, employee_name: str) -> Optional[SecurityConfirmation]:
        raise NotImplementedError

    def create(
        self,
        *,
        date: str,
        security_name: str,
        employee_name: str,
        position: str,
        confirmation_time: str,
    ) -> SecurityConfirmation:
        """Append-only; no duplicate check."""

        raise NotImplementedError
