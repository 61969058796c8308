"""
Verification module data models.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class OtpRecord(BaseModel):
    """The single active one-time code for an email. Only the hash is stored."""

    email: str = Field(..., description="Email the code was sent to (key)")
    code_hash: str = Field(..., description="Argon2 hash of the code")
    expires_at: datetime = Field(..., description="Code is usable while now <= expires_at")

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at


class VerifiedEmail(BaseModel):
    """Proof that an email passed OTP verification, consumed by registration."""

    email: str = Field(..., description="Verified email (key)")
    verified_at: datetime = Field(..., description="When verification succeeded")
    expires_at: datetime = Field(..., description="Registration must happen before this time")

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at


class SendOtpRequest(BaseModel):
    """Request a verification code for an email."""

    email: EmailStr = Field(..., description="Email address to verify")


class VerifyOtpRequest(BaseModel):
    """Submit a verification code."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: EmailStr = Field(..., description="Email address being verified")
    otp: str = Field(..., min_length=1, max_length=12, description="Code from the email")
