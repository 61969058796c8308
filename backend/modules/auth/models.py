"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr, TypeAdapter, ValidationError

from shared.models import AuthenticatedUser

_email_adapter = TypeAdapter(EmailStr)


class User(BaseModel):
    """
    A stored user record.

    Carries the password hash, so it never leaves the auth module;
    convert with to_identity() before handing it to other code.
    """

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Unique display name")
    email: str = Field(..., description="Unique email address")
    password_hash: str = Field(..., description="Argon2 hash of the password")
    country: str = Field(..., description="Country given at registration")
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    def to_identity(self) -> AuthenticatedUser:
        """Strip credentials and return the request-scoped identity."""
        return AuthenticatedUser(
            id=self.id,
            name=self.name,
            email=self.email,
            country=self.country,
        )


class RegisterRequest(BaseModel):
    """Request to create an account for a verified email."""

    name: str = Field(..., min_length=1, max_length=100, description="Unique display name")
    email: EmailStr = Field(..., description="Email address verified via OTP")
    password: str = Field(..., min_length=1, description="Plaintext password")
    country: str = Field(..., min_length=1, max_length=100, description="Country")


class LoginRequest(BaseModel):
    """Request to sign in with email or name."""

    identifier: str = Field(..., min_length=1, description="Email address or name")
    password: str = Field(..., min_length=1, description="Plaintext password")

    @property
    def lookup_identifier(self) -> str:
        """
        The identifier as stored in the users table.

        Emails are stored in EmailStr-normalized form (lowercased domain),
        so an identifier that parses as an email is normalized the same way.
        Names and unparseable values are used as given.
        """
        identifier = self.identifier
        if "@" not in identifier:
            return identifier
        try:
            return str(_email_adapter.validate_python(identifier))
        except ValidationError:
            return identifier


class UserWithToken(BaseModel):
    """Public identity plus a freshly issued bearer token."""

    id: str
    name: str
    email: str
    country: str
    token: str


class AuthResponse(BaseModel):
    """Response body for register and login."""

    message: str
    user: UserWithToken
