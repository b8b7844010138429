"""
Exception hierarchy for Unfold India.

Every error is scoped to the request that raised it; none is fatal to the
process. The HTTP layer maps each class to a status code in ``main.py``.
"""

from typing import Any


class UnfoldIndiaError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class Unauthenticated(UnfoldIndiaError):
    """Raised when an operation needs a session and none is present."""

    def __init__(
        self,
        message: str = "User not authenticated",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class NotFound(UnfoldIndiaError):
    """Raised when a requested row does not exist for the principal."""


class ValidationError(UnfoldIndiaError):
    """Raised when local input checks fail, before any remote call."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class RemoteFailure(UnfoldIndiaError):
    """Raised when the database or object store returns an error."""


class SessionTransitionError(UnfoldIndiaError):
    """Raised on a session state change the state machine does not allow."""
