"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and future extraction to a microservice.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import LoginRequest, RegisterRequest, UserWithToken


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for registration, login and bearer-token authentication.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> UserWithToken:
        """
        Create an account for an email that passed OTP verification.

        Args:
            request: Name, email, password and country

        Returns:
            The new identity with a bearer token

        Raises:
            EmailNotVerifiedError: If the email has no live verification
            UserAlreadyExistsError: If the email or name is taken
        """
        ...

    async def login(self, request: LoginRequest) -> UserWithToken:
        """
        Exchange credentials for a bearer token.

        Args:
            request: Email-or-name identifier and password

        Returns:
            The identity with a bearer token

        Raises:
            InvalidCredentialsError: For an unknown identifier or wrong password
        """
        ...

    async def authenticate(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Resolve a bearer token to the calling identity.

        Args:
            token: Raw bearer token, or None when the header was absent

        Returns:
            AuthenticatedUser without any credential fields

        Raises:
            MissingTokenError: If no token was presented
            InvalidTokenError: If the token is expired, invalid, or its user is gone
        """
        ...
