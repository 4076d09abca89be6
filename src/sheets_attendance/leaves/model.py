from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ApprovalStatus


@dataclass(frozen=True)
class LeaveRequest:
    date: str
    name: str
    position: str
    leave_type: str
    reason: str
    approval_status: str
    approved_by: str = ""
    row_number: int = 0

    @property
    def is_pending(self) -> bool:
        return self.approval_status == ApprovalStatus.PENDING.value
