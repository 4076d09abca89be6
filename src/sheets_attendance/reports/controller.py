from __future__ import annotations

from flask import Flask, request

from ..common.web import error_response, login_required, ok, unexpected_error
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/summary", methods=["GET"], endpoint="history_summary")
    @login_required(Role.EMPLOYEE)
    def history_summary(identity):
        days = request.args.get("days", DEFAULT_HISTORY_DAYS, type=int)
        try:
            return ok(container.report_service.history_summary(identity.name, days=days))
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "building the attendance summary")

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="monthly_recap")
    @login_required()
    def monthly_recap(identity):
        try:
            return ok(container.report_service.monthly_recap(request.args.get("month", "")))
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "loading the monthly recap")
