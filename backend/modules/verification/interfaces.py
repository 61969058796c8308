"""
Verification module interface.

The auth module checks and consumes verifications through
IVerificationService when registering a user.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IVerificationService(Protocol):
    """Interface for the email OTP handshake."""

    async def request_otp(self, email: str) -> None:
        """
        Issue a fresh code for an email and send it.

        Replaces any code previously issued for the same email. Email
        delivery is best-effort and never makes this call fail.

        Raises:
            EmailAlreadyRegisteredError: If a user already owns the email
        """
        ...

    async def verify_otp(self, email: str, code: str) -> None:
        """
        Check a submitted code and mark the email as verified.

        The code is single-use: a successful verification deletes it.

        Raises:
            OtpNotFoundError: If no code is pending for the email
            InvalidOrExpiredOtpError: If the code is wrong or expired
        """
        ...

    async def is_verified(self, email: str) -> bool:
        """Whether the email has a verification that has not expired."""
        ...

    async def consume_verification(self, email: str) -> None:
        """Remove the email's verification once it has been used."""
        ...
