from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, Tuple

from ..core.constants import FIRST_DATA_ROW
from ..core.exceptions import PartialWriteError, StoreError
from .client import SheetStore

logger = logging.getLogger(__name__)


def cell_text(value: Any) -> str:
    """Normalize a raw cell (str, number, None) to the string the core compares."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rows_to_records(values: Sequence[Sequence[Any]]) -> List[Dict[str, str]]:
    if not values or len(values) < 2:
        return []

    headers = [cell_text(h).strip() for h in values[0]]
    out: List[Dict[str, str]] = []
    for row in values[1:]:
        out.append({h: (cell_text(row[i]) if i < len(row) else "") for i, h in enumerate(headers)})
    return out


def column_letter(columns: Sequence[str], name: str) -> str:
    """A1-notation letter of ``name`` within the fixed column order."""
    try:
        n = columns.index(name) + 1
    except ValueError:
        raise KeyError(f"Unknown column {name!r}")

    letters = ""
    while n:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def row_number(index_in_data: int) -> int:
    """Sheet row of the data row at ``index_in_data`` (0-based) of a fresh read."""
    return int(index_in_data) + FIRST_DATA_ROW


def write_cells(
    store: SheetStore,
    table: str,
    columns: Sequence[str],
    row_index: int,
    updates: Sequence[Tuple[str, str]],
) -> None:
    """Issue one single-cell write per update, in order.

    A failure on the first cell is re-raised as is; a failure after that is a
    PartialWriteError, the cells already written stay written.
    """
    written: List[str] = []
    for pos, (column, value) in enumerate(updates):
        try:
            store.write_cell(table, row_index, column_letter(columns, column), value)
        except StoreError as e:
            if not written:
                raise
            pending = [c for c, _ in updates[pos:]]
            logger.error(
                "Partial write on %s row %s: written=%s pending=%s (%s)",
                table, row_index, written, pending, e,
            )
            raise PartialWriteError(
                f"{table} row {row_index} partially updated; pending: {', '.join(pending)}",
                written=written,
                pending=pending,
                status=e.status,
            ) from e
        written.append(column)


def header_mismatches(expected: Sequence[str], header: Sequence[Any]) -> List[str]:
    """Differences between a sheet's header row and the fixed column order."""
    actual = [cell_text(h).strip() for h in header]
    problems: List[str] = []
    for i, name in enumerate(expected):
        letter = column_letter(expected, name)
        if i >= len(actual):
            problems.append(f"column {letter} missing, expected {name!r}")
        elif actual[i] != name:
            problems.append(f"column {letter} is {actual[i]!r}, expected {name!r}")
    return problems
