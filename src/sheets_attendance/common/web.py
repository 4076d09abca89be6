from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from functools import wraps
from typing import Any, Optional

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    PartialWriteError,
    StoreError,
    ValidationError,
)
from ..employees.model import Identity

logger = logging.getLogger(__name__)

SESSION_KEY = "identity"

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (StoreError, 502),
)


def current_identity() -> Optional[Identity]:
    data = session.get(SESSION_KEY)
    if not data:
        return None
    try:
        return Identity.from_session(data)
    except (KeyError, ValueError):
        session.pop(SESSION_KEY, None)
        return None


def login_required(role: Optional[Role] = None):
    """Pass the session identity to the view as ``identity``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = current_identity()
            if identity is None:
                return jsonify({"success": False, "error": "AuthenticationError", "message": "Please log in"}), 401
            if role is not None and identity.role != role:
                return jsonify({"success": False, "error": "AuthorizationError", "message": "Forbidden"}), 403
            return view(identity, *args, **kwargs)

        return wrapper

    return decorator


def to_json(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def ok(data: Any = None, status: int = 200, **extra):
    body = {"success": True, "data": to_json(data)}
    body.update(extra)
    return jsonify(body), status


def error_response(e: DomainError):
    status = 400
    for cls, code in _STATUS_BY_ERROR:
        if isinstance(e, cls):
            status = code
            break

    body = {"success": False, "error": type(e).__name__, "message": str(e)}
    if isinstance(e, ConflictError):
        body["reason"] = e.reason
    if isinstance(e, PartialWriteError):
        body["written"] = e.written
        body["pending"] = e.pending
    return jsonify(body), status


def unexpected_error(e: Exception, what: str):
    logger.exception("Unexpected error while %s", what)
    return jsonify({"success": False, "error": "InternalError", "message": f"System error while {what}"}), 500
