from __future__ import annotations

import re
from enum import Enum
from typing import Type, TypeVar

from ..core.constants import PIN_LENGTH
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

_PIN_RE = re.compile(rf"^[0-9]{{{PIN_LENGTH}}}$")
_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_pin(value: str) -> str:
    pin = (value or "").strip()
    if not _PIN_RE.match(pin):
        raise ValidationError(f"PIN must be exactly {PIN_LENGTH} digits")
    return pin


def require_month(value: str) -> str:
    month = (value or "").strip()
    if not _MONTH_RE.match(month):
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")
    return month


def require_choice(value, enum_cls: Type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls((value or "").strip())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
