from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import LEAVE_REQUEST_COLUMNS, LEAVE_REQUESTS_TABLE
from ..core.enums import ApprovalStatus
from ..store.client import SheetStore
from ..store.sheet_base import row_number, write_cells
from .model import LeaveRequest
from .repository import LeaveRequestRepository


class SheetLeaveRequestRepository(LeaveRequestRepository):
    def __init__(self, store: SheetStore):
        self._store = store

    def list_all(self) -> Sequence[LeaveRequest]:
        return [
            LeaveRequest(
                date=r.get("Date", ""),
                name=r.get("Name", ""),
                position=r.get("Position", ""),
                leave_type=r.get("LeaveType", ""),
                reason=r.get("Reason", ""),
                approval_status=r.get("ApprovalStatus", ""),
                approved_by=r.get("ApprovedBy", ""),
                row_number=row_number(i),
            )
            for i, r in enumerate(self._store.read_all(LEAVE_REQUESTS_TABLE))
        ]

    def find_pending(self, *, work_date: str, name: str) -> Optional[LeaveRequest]:
        for req in self.list_all():
            if req.date == work_date and req.name == name and req.is_pending:
                return req
        return None

    def create(self, *, work_date: str, name: str, position: str, leave_type: str, reason: str) -> LeaveRequest:
        req = LeaveRequest(
            date=work_date,
            name=name,
            position=position,
            leave_type=leave_type,
            reason=reason,
            approval_status=ApprovalStatus.PENDING.value,
        )
        self._store.append(
            LEAVE_REQUESTS_TABLE,
            [req.date, req.name, req.position, req.leave_type, req.reason, req.approval_status, req.approved_by],
        )
        return req

    def decide(self, *, row_number: int, status: ApprovalStatus, approved_by: str) -> None:
        write_cells(
            self._store,
            LEAVE_REQUESTS_TABLE,
            LEAVE_REQUEST_COLUMNS,
            row_number,
            [("ApprovalStatus", status.value), ("ApprovedBy", approved_by)],
        )
