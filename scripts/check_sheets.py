from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from dotenv import load_dotenv

from config import get_settings_module

from sheets_attendance.core.constants import TABLE_COLUMNS
from sheets_attendance.store.connection import SheetsConfig
from sheets_attendance.store.google_sheets_store import GoogleSheetsStore
from sheets_attendance.store.sheet_base import header_mismatches


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    cfg = dict(settings.SHEETS_CONFIG)
    store = GoogleSheetsStore(
        SheetsConfig(
            spreadsheet_id=str(cfg["spreadsheet_id"]),
            api_key=cfg.get("api_key") or None,
            access_token=cfg.get("access_token") or None,
            timeout=float(cfg.get("timeout", 10)),
            retries=int(cfg.get("retries", 3)),
        )
    )

    failed = False
    for table, columns in TABLE_COLUMNS.items():
        problems = header_mismatches(columns, store.read_header(table))
        if problems:
            failed = True
            print(f"FAIL {table}:")
            for p in problems:
                print(f"  - {p}")
        else:
            print(f"OK   {table}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
