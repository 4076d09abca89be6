from __future__ import annotations

from flask import Flask, request, session

from ..common.web import SESSION_KEY, error_response, login_required, ok, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            identity = container.identity_service.resolve(str(data.get("pin", "")))
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            return unexpected_error(e, "logging in")

        session.clear()
        session[SESSION_KEY] = identity.to_session()
        session.permanent = bool(data.get("remember"))
        return ok(identity)

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok()

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required()
    def me(identity):
        return ok(identity)
