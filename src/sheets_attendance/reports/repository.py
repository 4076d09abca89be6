from __future__ import annotations

from typing import Dict, Protocol, Sequence


class MonthlyRecapRepository(Protocol):
    def list_for_month(self, month: str) -> Sequence[Dict[str, str]]:
        """Rows whose ``Month`` column equals YYYY-MM, other columns passed through."""

        raise NotImplementedError
