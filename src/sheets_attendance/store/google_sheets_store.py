from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..core.exceptions import StoreError
from .client import SheetStore
from .connection import SheetsConfig
from .sheet_base import rows_to_records

logger = logging.getLogger(__name__)

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets"


class GoogleSheetsStore(SheetStore):
    """SheetStore on the Google Sheets v4 ``values`` REST endpoints.

    Timeouts and retries live here. Only GET and PUT are retried: a single-cell
    PUT sets an absolute value, an append is not idempotent.
    """

    def __init__(self, config: SheetsConfig, *, session: Optional[requests.Session] = None):
        if not config.spreadsheet_id:
            raise ValueError("spreadsheet_id is required")
        self._config = config
        self._base_url = f"{SHEETS_API_URL}/{config.spreadsheet_id}"
        self._session = session or self._build_session(config)

    @staticmethod
    def _build_session(config: SheetsConfig) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=int(config.retries),
            backoff_factor=0.5,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset({"GET", "PUT"}),
        )
        session.mount("https://", HTTPAdapter(max_retries=retry))
        return session

    def _request(self, method: str, range_: str, *, params: Optional[dict] = None, json: Any = None) -> Dict[str, Any]:
        query = dict(params or {})
        if self._config.api_key:
            query["key"] = self._config.api_key
        headers = {}
        if self._config.access_token:
            headers["Authorization"] = f"Bearer {self._config.access_token}"

        url = f"{self._base_url}/values/{quote(range_, safe='!:')}"
        try:
            resp = self._session.request(
                method,
                url,
                params=query,
                json=json,
                headers=headers,
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.error("Sheets %s %s failed: %s", method, range_, e)
            raise StoreError(f"Sheets request failed: {e}") from e

        if not resp.ok:
            detail = _error_detail(resp)
            logger.error("Sheets %s %s -> HTTP %s: %s", method, range_, resp.status_code, detail)
            raise StoreError(f"Sheets API error {resp.status_code}: {detail}", status=resp.status_code)

        if not resp.content:
            return {}
        return resp.json()

    def read_all(self, table: str) -> List[Dict[str, str]]:
        data = self._request("GET", table)
        records = rows_to_records(data.get("values") or [])
        logger.debug("Read %d rows from %s", len(records), table)
        return records

    def read_header(self, table: str) -> List[str]:
        data = self._request("GET", f"{table}!1:1")
        values = data.get("values") or [[]]
        return [str(v) for v in values[0]]

    def append(self, table: str, values: Sequence[str]) -> None:
        self._request(
            "POST",
            f"{table}:append",
            params={"valueInputOption": "USER_ENTERED", "insertDataOption": "INSERT_ROWS"},
            json={"values": [list(values)]},
        )
        logger.debug("Appended row to %s", table)

    def write_cell(self, table: str, row_index: int, column: str, value: str) -> None:
        cell = f"{table}!{column}{int(row_index)}"
        self._request(
            "PUT",
            cell,
            params={"valueInputOption": "USER_ENTERED"},
            json={"values": [[value]]},
        )
        logger.debug("Updated %s", cell)


def _error_detail(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return (resp.text or "").strip()[:200] or resp.reason or "unknown error"
    err = body.get("error") if isinstance(body, dict) else None
    if isinstance(err, dict):
        return str(err.get("message") or err.get("status") or err)
    return str(err or body)
