from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ApprovalStatus
from .model import LeaveRequest


class LeaveRequestRepository(Protocol):
    def list_all(self) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def find_pending(self, *, work_date: str, name: str) -> Optional[LeaveRequest]:
        """First Pending request for (date, name) in table order."""

        raise NotImplementedError

    def create(self, *, work_date: str, name: str, position: str, leave_type: str, reason: str) -> LeaveRequest:
        raise NotImplementedError

    def decide(self, *, row_number: int, status: ApprovalStatus, approved_by: str) -> None:
        """Write ApprovalStatus then ApprovedBy; may raise PartialWriteError."""

        raise NotImplementedError
