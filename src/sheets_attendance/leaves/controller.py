from __future__ import annotations

from flask import Flask, request

from ..common.web import error_response, login_required, ok, unexpected_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["POST"], endpoint="new_leave")
    @login_required(Role.EMPLOYEE)
    def new_leave(identity):
        data = request.get_json(silent=True) or {}
        try:
            req = container.leave_service.submit(
                identity,
                work_date=str(data.get("date", "")),
                leave_type=str(data.get("leave_type", "")),
                reason=str(data.get("reason", "")),
            )
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "submitting the leave request")
        return ok(req, status=201)

    @app.route("/api/leaves/mine", methods=["GET"], endpoint="my_leaves")
    @login_required(Role.EMPLOYEE)
    def my_leaves(identity):
        try:
            return ok(container.leave_service.list_for_employee(identity.name))
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "loading leave requests")

    @app.route("/api/leaves/pending", methods=["GET"], endpoint="pending_leaves")
    @login_required(Role.SECURITY)
    def pending_leaves(identity):
        try:
            return ok(container.leave_service.list_pending())
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "loading pending leave requests")

    @app.route("/api/leaves/process", methods=["POST"], endpoint="process_leave")
    @login_required(Role.SECURITY)
    def process_leave(identity):
        data = request.get_json(silent=True) or {}
        try:
            req = container.leave_service.process(
                str(data.get("date", "")),
                str(data.get("name", "")),
                str(data.get("action", "")),
                identity,
            )
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "processing the leave request")
        return ok(req)
