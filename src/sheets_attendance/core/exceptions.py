from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is malformed (bad PIN, date, time, empty reason...)."""


class AuthenticationError(DomainError):
    """Raised when no employee matches the given PIN."""


class AuthorizationError(DomainError):
    """Raised when the identity's role may not perform an action."""


class NotFoundError(DomainError):
    """Raised when the row targeted by an update does not exist."""


class ConflictError(DomainError):
    """Raised when existing state (or the clock) forbids an action."""

    def __init__(self, message: str, *, reason: str):
        super().__init__(message)
        self.reason = reason


class StoreError(DomainError):
    """Raised when the table store fails (network, transport, quota)."""

    def __init__(self, message: str, *, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class PartialWriteError(StoreError):
    """A multi-cell update stopped after some cells were already written.

    The row is left inconsistent and is not rolled back.
    """

    def __init__(
        self,
        message: str,
        *,
        written: Sequence[str],
        pending: Sequence[str],
        status: Optional[int] = None,
    ):
        super().__init__(message, status=status)
        self.written = list(written)
        self.pending = list(pending)
