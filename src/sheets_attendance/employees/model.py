from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: one row of the Employees sheet.

    Note: Plain data object, no store access. ``pin`` is already normalized to
    its zero-padded 4-character form when it is all digits.
    """

    name: str
    position: str
    pin: str
    role: Optional[Role]
    row_number: int = 0


@dataclass(frozen=True)
class Identity:
    """Resolved identity handed to every workflow call (never holds the PIN)."""

    name: str
    position: str
    role: Role

    def to_session(self) -> dict:
        return {"name": self.name, "position": self.position, "role": self.role.value}

    @classmethod
    def from_session(cls, data: dict) -> "Identity":
        return cls(name=str(data["name"]), position=str(data.get("position") or ""), role=Role(data["role"]))
