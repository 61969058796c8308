"""
Verification module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when requesting a code for an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email Already Registered",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class OtpNotFoundError(NotFoundError):
    """Raised when no code is pending for the email (never sent, or already used)."""

    def __init__(self, email: str):
        super().__init__(
            "OTP not found or expired",
            code="OTP_NOT_FOUND",
            details={"email": email},
        )


class InvalidOrExpiredOtpError(ValidationError):
    """
    Raised when a submitted code does not match or has expired.

    Both cases deliberately share this one error.
    """

    def __init__(self):
        super().__init__("Invalid or expired OTP", code="INVALID_OR_EXPIRED_OTP")
