from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from ..common.datetime_utils import current_date, current_time, is_within_confirmation_window, now_local
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConflictError
from ..employees.model import Employee, Identity
from ..employees.repository import EmployeeRepository
from .model import BoardEntry, SecurityConfirmation
from .repository import ConfirmationRepository

logger = logging.getLogger(__name__)


class ConfirmationService:
    """Use case: security guards confirm employees between 06:00 and 09:00."""

    def __init__(self, confirmations: ConfirmationRepository, employees: EmployeeRepository):
        self._confirmations = confirmations
        self._employees = employees

    def is_confirmed(self, date: str, employee_name: str) -> bool:
        return self._confirmations.find(date=date, employee_name=employee_name) is not None

    def confirm(self, security: Identity, employee: Employee, *, now: Optional[datetime] = None) -> SecurityConfirmation:
        """Append a confirmation row.

        The gate does not deduplicate: confirming twice yields two rows. Callers
        check ``is_confirmed`` first.
        """
        if security.role != Role.SECURITY:
            raise AuthorizationError("Only security personnel can confirm attendance")

        now = now or now_local()
        if not is_within_confirmation_window(now):
            raise ConflictError("Confirmation is only allowed between 06:00 and 09:00", reason="OutOfWindow")

        confirmation = self._confirmations.create(
            date=current_date(now),
            security_name=security.name,
            employee_name=employee.name,
            position=employee.position,
            confirmation_time=current_time(now),
        )
        logger.info("%s confirmed %s on %s", security.name, employee.name, confirmation.date)
        return confirmation

    def confirmation_board(self, *, now: Optional[datetime] = None) -> List[BoardEntry]:
        today = current_date(now or now_local())
        confirmed = {c.employee_name for c in self._confirmations.list_all() if c.date == today}
        return [
            BoardEntry(employee_name=e.name, position=e.position, confirmed=e.name in confirmed)
            for e in self._employees.list_all()
            if e.role == Role.EMPLOYEE
        ]
