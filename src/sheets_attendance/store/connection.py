from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class SheetsConfig:
    spreadsheet_id: str
    api_key: Optional[str] = None
    access_token: Optional[str] = None
    timeout: float = 10.0
    retries: int = 3
