from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the Employees sheet (read-only to the core)."""

    def list_all(self) -> Sequence[Employee]:
        """All employees in table order."""

        raise NotImplementedError
