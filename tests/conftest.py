from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

import pytest

from sheets_attendance.core.constants import (
    ATTENDANCE_COLUMNS,
    ATTENDANCE_TABLE,
    CONFIRMATION_COLUMNS,
    CONFIRMATIONS_TABLE,
    EMPLOYEE_COLUMNS,
    EMPLOYEES_TABLE,
    LEAVE_REQUEST_COLUMNS,
    LEAVE_REQUESTS_TABLE,
)
from sheets_attendance.core.enums import Role
from sheets_attendance.core.exceptions import StoreError
from sheets_attendance.employees.model import Identity
from sheets_attendance.store.sheet_base import rows_to_records


class InMemorySheetStore:
    """SheetStore fake: tables are lists of rows, row 0 is the header.

    ``writes_before_failure`` lets N cell writes succeed, then every further
    write raises StoreError (simulates quota/network failure mid-sequence).
    """

    def __init__(self, tables: Optional[Dict[str, List[List[str]]]] = None):
        self.tables: Dict[str, List[List[str]]] = {k: [list(r) for r in v] for k, v in (tables or {}).items()}
        self.writes: List[tuple] = []
        self.appends: List[tuple] = []
        self.writes_before_failure: Optional[int] = None
        self.fail_reads = False

    def read_all(self, table: str):
        if self.fail_reads:
            raise StoreError("read failed", status=503)
        return rows_to_records(self.tables.get(table, []))

    def append(self, table: str, values):
        self.appends.append((table, list(values)))
        self.tables.setdefault(table, []).append([str(v) for v in values])

    def write_cell(self, table: str, row_index: int, column: str, value: str):
        if self.writes_before_failure is not None:
            if self.writes_before_failure <= 0:
                raise StoreError("quota exceeded", status=429)
            self.writes_before_failure -= 1

        self.writes.append((table, row_index, column, value))
        row = self.tables[table][row_index - 1]
        col = ord(column) - ord("A")
        while len(row) <= col:
            row.append("")
        row[col] = value

    def records(self, table: str):
        return rows_to_records(self.tables.get(table, []))


EMPLOYEES = [
    ["Alice", "Engineer", "0423", "Employee"],
    ["Bob", "Accountant", "1111", "Employee"],
    ["Sam", "Guard", "9999", "Security"],
]


@pytest.fixture
def store() -> InMemorySheetStore:
    return InMemorySheetStore(
        {
            EMPLOYEES_TABLE: [list(EMPLOYEE_COLUMNS)] + [list(r) for r in EMPLOYEES],
            CONFIRMATIONS_TABLE: [list(CONFIRMATION_COLUMNS)],
            ATTENDANCE_TABLE: [list(ATTENDANCE_COLUMNS)],
            LEAVE_REQUESTS_TABLE: [list(LEAVE_REQUEST_COLUMNS)],
        }
    )


@pytest.fixture
def alice() -> Identity:
    return Identity(name="Alice", position="Engineer", role=Role.EMPLOYEE)


@pytest.fixture
def bob() -> Identity:
    return Identity(name="Bob", position="Accountant", role=Role.EMPLOYEE)


@pytest.fixture
def guard() -> Identity:
    return Identity(name="Sam", position="Guard", role=Role.SECURITY)


@pytest.fixture
def morning() -> datetime:
    return datetime(2026, 2, 2, 8, 5)


@pytest.fixture
def evening() -> datetime:
    return datetime(2026, 2, 2, 17, 30)
