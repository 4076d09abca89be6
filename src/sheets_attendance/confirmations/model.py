from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SecurityConfirmation:
    """Domain entity: a guard confirmed an employee is physically present."""

    date: str
    security_name: str
    employee_name: str
    position: str
    confirmation_time: str
    row_number: int = 0


@dataclass(frozen=True)
class BoardEntry:
    """Read-model for the security confirmation page."""

    employee_name: str
    position: str
    confirmed: bool
