from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import EMPLOYEES_TABLE, PIN_LENGTH
from ..core.enums import Role
from ..store.client import SheetStore
from ..store.sheet_base import row_number
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def normalize_pin(value: str) -> str:
    """PIN column as a zero-padded 4-character string.

    The sheet may hold ``0423`` as text or as the number 423; both become "0423".
    """
    pin = (value or "").strip()
    if pin.isdigit() and len(pin) < PIN_LENGTH:
        pin = pin.zfill(PIN_LENGTH)
    return pin


def _parse_role(value: str) -> Optional[Role]:
    try:
        return Role((value or "").strip())
    except ValueError:
        return None


class SheetEmployeeRepository(EmployeeRepository):
    def __init__(self, store: SheetStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        out = []
        for i, r in enumerate(self._store.read_all(EMPLOYEES_TABLE)):
            role = _parse_role(r.get("Role", ""))
            if role is None:
                logger.warning("Employee %r has unknown role %r", r.get("Name"), r.get("Role"))
            out.append(
                Employee(
                    name=r.get("Name", ""),
                    position=r.get("Position", ""),
                    pin=normalize_pin(r.get("PIN", "")),
                    role=role,
                    row_number=row_number(i),
                )
            )
        return out
