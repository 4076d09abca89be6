from __future__ import annotations

from typing import Dict, List, Protocol, Sequence


class SheetStore(Protocol):
    """Row-oriented access to the named tables of one spreadsheet.

    Note (DIP): repositories depend on this interface, not on the Google API.
    No atomicity is offered across calls.
    """

    def read_all(self, table: str) -> List[Dict[str, str]]:
        """Header row + data rows turned into dicts; fewer than 2 rows => []."""

        raise NotImplementedError

    def append(self, table: str, values: Sequence[str]) -> None:
        raise NotImplementedError

    def write_cell(self, table: str, row_index: int, column: str, value: str) -> None:
        """Write one cell; ``row_index`` is 1-based (header is row 1), ``column`` a letter."""

        raise NotImplementedError
