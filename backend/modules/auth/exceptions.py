"""
Authentication module exceptions.

These exceptions are raised by the auth module and translated into
HTTP responses by the API error handlers.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ValidationError,
)


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Not authorized, no token"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """
    Raised when a bearer token cannot be accepted.

    Covers bad signatures, malformed tokens, expired tokens and tokens
    for users that no longer exist. The message is the same for all of them.
    """

    def __init__(self, message: str = "Not authorized, token failed"):
        super().__init__(message, code="INVALID_TOKEN")


class InvalidCredentialsError(ValidationError):
    """
    Raised when login fails.

    Unknown identifier and wrong password produce this same error so the
    response never reveals whether an account exists.
    """

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class UserAlreadyExistsError(ConflictError):
    """Raised when registering with an email or name that is taken."""

    def __init__(self):
        super().__init__("Name or email already exists", code="USER_ALREADY_EXISTS")


class EmailNotVerifiedError(AuthorizationError):
    """Raised when registering an email without a live OTP verification."""

    def __init__(self, email: str):
        super().__init__(
            "Email not verified. Please verify first.",
            code="EMAIL_NOT_VERIFIED",
            details={"email": email},
        )
