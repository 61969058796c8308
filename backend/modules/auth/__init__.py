"""
Authentication module.

Handles registration, login, bearer-token validation and the user store.

Public API:
- IAuthService: Interface for auth operations
- User: Stored user record (contains the password hash)
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IAuthService
from .models import User, RegisterRequest, LoginRequest, UserWithToken, AuthResponse
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    EmailNotVerifiedError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "User",
    "RegisterRequest",
    "LoginRequest",
    "UserWithToken",
    "AuthResponse",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "UserAlreadyExistsError",
    "EmailNotVerifiedError",
]
