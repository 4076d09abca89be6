from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.service import AttendanceService
from .attendance.sheet_attendance_repository import SheetAttendanceRepository
from .common.locking import KeyedLock
from .confirmations.service import ConfirmationService
from .confirmations.sheet_confirmation_repository import SheetConfirmationRepository
from .employees.service import IdentityService
from .employees.sheet_employee_repository import SheetEmployeeRepository
from .leaves.service import LeaveService
from .leaves.sheet_leave_repository import SheetLeaveRequestRepository
from .reports.service import AttendanceReportService
from .reports.sheet_recap_repository import SheetMonthlyRecapRepository
from .store.client import SheetStore
from .store.connection import SheetsConfig
from .store.google_sheets_store import GoogleSheetsStore


@dataclass(frozen=True)
class Container:
    store: SheetStore

    employees_repo: SheetEmployeeRepository
    confirmations_repo: SheetConfirmationRepository
    attendance_repo: SheetAttendanceRepository
    leaves_repo: SheetLeaveRequestRepository
    recaps_repo: SheetMonthlyRecapRepository

    identity_service: IdentityService
    confirmation_service: ConfirmationService
    attendance_service: AttendanceService
    leave_service: LeaveService
    report_service: AttendanceReportService


def build_container(
    *,
    sheets_config: Optional[dict] = None,
    store: Optional[SheetStore] = None,
    enforce_gates: bool = True,
    overwrite_on_approval: bool = True,
) -> Container:
    if store is None:
        if not sheets_config:
            raise ValueError("sheets_config or store is required")
        store = GoogleSheetsStore(
            SheetsConfig(
                spreadsheet_id=str(sheets_config["spreadsheet_id"]),
                api_key=sheets_config.get("api_key") or None,
                access_token=sheets_config.get("access_token") or None,
                timeout=float(sheets_config.get("timeout", 10)),
                retries=int(sheets_config.get("retries", 3)),
            )
        )

    employees_repo = SheetEmployeeRepository(store)
    confirmations_repo = SheetConfirmationRepository(store)
    attendance_repo = SheetAttendanceRepository(store)
    leaves_repo = SheetLeaveRequestRepository(store)
    recaps_repo = SheetMonthlyRecapRepository(store)

    # Shared so a leave approval and a check-out on the same (date, name) never interleave.
    locks = KeyedLock()

    identity_service = IdentityService(employees_repo)
    confirmation_service = ConfirmationService(confirmations_repo, employees_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        confirmation_service,
        locks=locks,
        enforce_gates=enforce_gates,
    )
    leave_service = LeaveService(
        leaves_repo,
        attendance_repo,
        locks=locks,
        overwrite_on_approval=overwrite_on_approval,
    )
    report_service = AttendanceReportService(attendance_service, recaps_repo)

    return Container(
        store=store,
        employees_repo=employees_repo,
        confirmations_repo=confirmations_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        recaps_repo=recaps_repo,
        identity_service=identity_service,
        confirmation_service=confirmation_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        report_service=report_service,
    )
