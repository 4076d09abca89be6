from __future__ import annotations

from flask import Flask, request

from ..common.web import error_response, login_required, ok, unexpected_error
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required(Role.EMPLOYEE)
    def attendance_today(identity):
        try:
            record = container.attendance_service.today_record(identity)
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "loading today's attendance")
        return ok(record)

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="checkin")
    @login_required(Role.EMPLOYEE)
    def checkin(identity):
        data = request.get_json(silent=True) or {}
        try:
            record = container.attendance_service.check_in(
                identity,
                photo_url=str(data.get("photo_url", "")),
                location=str(data.get("location", "")),
            )
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "checking in")
        return ok(record, status=201)

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="checkout")
    @login_required(Role.EMPLOYEE)
    def checkout(identity):
        data = request.get_json(silent=True) or {}
        try:
            record = container.attendance_service.check_out(
                identity,
                photo_url=str(data.get("photo_url", "")),
                location=str(data.get("location", "")),
            )
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "checking out")
        return ok(record)

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required(Role.EMPLOYEE)
    def attendance_history(identity):
        days = request.args.get("days", DEFAULT_HISTORY_DAYS, type=int)
        try:
            rows = container.attendance_service.history(identity.name, days=days)
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "loading attendance history")
        return ok(rows)
