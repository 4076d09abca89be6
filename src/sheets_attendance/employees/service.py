from __future__ import annotations

import logging
from typing import List, Optional

from ..common.validators import require_pin
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError
from .model import Employee, Identity
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class IdentityService:
    """Use case: resolve a PIN to an identity (login) and look up employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def resolve(self, pin: str) -> Identity:
        """Return the identity of the first employee whose PIN matches.

        If two employees share a PIN the first one in table order wins; a
        warning is logged because nothing upstream prevents it.
        """
        pin = require_pin(pin)
        matches = [e for e in self._employees.list_all() if e.pin == pin]
        if not matches:
            logger.info("Login rejected: invalid PIN")
            raise AuthenticationError("Invalid PIN")

        if len(matches) > 1:
            logger.warning(
                "PIN shared by %d employees (%s); using the first row",
                len(matches), ", ".join(e.name for e in matches),
            )

        employee = matches[0]
        if employee.role is None:
            raise AuthorizationError(f"Employee {employee.name} has no valid role")

        logger.info("Resolved %s (%s)", employee.name, employee.role.value)
        return Identity(name=employee.name, position=employee.position, role=employee.role)

    def list_employees(self, *, role: Optional[Role] = None) -> List[Employee]:
        employees = self._employees.list_all()
        if role is None:
            return list(employees)
        return [e for e in employees if e.role == role]

    def get_employee(self, name: str) -> Employee:
        for e in self._employees.list_all():
            if e.name == name:
                return e
        raise NotFoundError(f"Employee {name!r} not found")
