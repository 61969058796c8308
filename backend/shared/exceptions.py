"""
Base exception classes for the Task Tracker backend.

Each module defines its own exceptions that inherit from these bases.
Every base carries the HTTP status it maps to, so the API layer can
translate any TrackerError into a JSON response without knowing the module.
"""

from typing import Optional, Any


class TrackerError(Exception):
    """
    Base exception for all Task Tracker errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(TrackerError):
    """Input validation failed."""

    status_code = 400


class ConflictError(TrackerError):
    """Resource already exists (duplicate email, name, ...)."""

    status_code = 400


class AuthenticationError(TrackerError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(TrackerError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class NotFoundError(TrackerError):
    """Resource not found."""

    status_code = 404


class ExternalServiceError(TrackerError):
    """Error communicating with an external service."""

    status_code = 500

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
