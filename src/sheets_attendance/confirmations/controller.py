from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import current_date, is_within_confirmation_window, now_local
from ..common.web import error_response, login_required, ok, unexpected_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ConflictError, DomainError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/confirmations/board", methods=["GET"], endpoint="confirmation_board")
    @login_required(Role.SECURITY)
    def confirmation_board(identity):
        now = now_local()
        try:
            board = container.confirmation_service.confirmation_board(now=now)
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "loading the confirmation board")
        return ok(board, window_open=is_within_confirmation_window(now))

    @app.route("/api/confirmations", methods=["POST"], endpoint="confirm_attendance")
    @login_required(Role.SECURITY)
    def confirm_attendance(identity):
        data = request.get_json(silent=True) or {}
        now = now_local()
        try:
            employee = container.identity_service.get_employee(str(data.get("employee_name", "")))
            if employee.role != Role.EMPLOYEE:
                raise ValidationError(f"{employee.name} is not an employee")
            if container.confirmation_service.is_confirmed(current_date(now), employee.name):
                raise ConflictError(f"{employee.name} is already confirmed today", reason="AlreadyConfirmed")
            confirmation = container.confirmation_service.confirm(identity, employee, now=now)
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "confirming attendance")
        return ok(confirmation, status=201)
