"""
Verification module.

Email ownership proof via one-time codes, gating registration.

Public API:
- IVerificationService: Interface for the OTP handshake
- Verification exceptions: EmailAlreadyRegisteredError, OtpNotFoundError,
  InvalidOrExpiredOtpError
"""

from .interfaces import IVerificationService
from .models import OtpRecord, VerifiedEmail
from .exceptions import (
    EmailAlreadyRegisteredError,
    OtpNotFoundError,
    InvalidOrExpiredOtpError,
)

__all__ = [
    "IVerificationService",
    "OtpRecord",
    "VerifiedEmail",
    "EmailAlreadyRegisteredError",
    "OtpNotFoundError",
    "InvalidOrExpiredOtpError",
]
