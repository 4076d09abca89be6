from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles stored in the Employees sheet."""

    EMPLOYEE = "Employee"
    SECURITY = "Security"


class CheckInStatus(str, Enum):
    ON_TIME = "On Time"
    LATE = "Late"
    VERY_LATE = "Very Late"
    LEAVE = "Leave"


class CheckOutStatus(str, Enum):
    PENDING = "Pending"
    PRESENT = "Present"
    LEAVE = "Leave"


class ApprovalStatus(str, Enum):
    """Leave request approval flow."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class LeaveAction(str, Enum):
    APPROVE = "Approve"
    REJECT = "Reject"


class LeaveType(str, Enum):
    SICK = "Sick Leave"
    VACATION = "Vacation Leave"
    PERSONAL = "Personal Leave"
