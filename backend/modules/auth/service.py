"""
Authentication service implementation.

Registers verified emails, checks credentials, and resolves bearer
tokens back to users.
"""

import logging
from typing import Optional

import jwt
from fastapi.concurrency import run_in_threadpool

from modules.notifications.interfaces import INotifier
from modules.notifications.templates import welcome_email
from modules.verification.interfaces import IVerificationService
from shared.models import AuthenticatedUser
from shared.security import SecretHasher, TokenIssuer

from .exceptions import (
    EmailNotVerifiedError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserAlreadyExistsError,
)
from .interfaces import IAuthService
from .models import LoginRequest, RegisterRequest, User, UserWithToken
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Credentials live in the users table; tokens are stateless HS256 JWTs
    whose subject is the user id.
    """

    def __init__(
        self,
        users: UserRepository,
        verification: IVerificationService,
        hasher: SecretHasher,
        tokens: TokenIssuer,
        notifier: INotifier,
    ):
        self._users = users
        self._verification = verification
        self._hasher = hasher
        self._tokens = tokens
        self._notifier = notifier
        self._dummy_hash: Optional[str] = None

    async def register(self, request: RegisterRequest) -> UserWithToken:
        email = str(request.email)

        if not await self._verification.is_verified(email):
            raise EmailNotVerifiedError(email)

        if self._users.find_by_email_or_name(email, request.name) is not None:
            raise UserAlreadyExistsError()

        password_hash = await run_in_threadpool(self._hasher.hash, request.password)
        user = self._users.create(
            name=request.name,
            email=email,
            password_hash=password_hash,
            country=request.country,
        )
        await self._verification.consume_verification(email)
        logger.info("Registered user %s", user.id)

        self._notifier.notify(welcome_email(user.email, user.name))
        return self._with_token(user)

    async def login(self, request: LoginRequest) -> UserWithToken:
        user = self._users.find_by_identifier(request.lookup_identifier)

        if user is None:
            # Burn the same hashing cost as a real check so timing does
            # not reveal whether the identifier exists.
            dummy_hash = await self._get_dummy_hash()
            await run_in_threadpool(self._hasher.verify, dummy_hash, request.password)
            logger.info("Login failed for identifier %r", request.identifier)
            raise InvalidCredentialsError()

        if not await run_in_threadpool(self._hasher.verify, user.password_hash, request.password):
            logger.info("Login failed for identifier %r", request.identifier)
            raise InvalidCredentialsError()

        return self._with_token(user)

    async def authenticate(self, token: Optional[str]) -> AuthenticatedUser:
        if not token:
            raise MissingTokenError()

        try:
            user_id = self._tokens.decode(token)
        except jwt.InvalidTokenError as e:
            # ExpiredSignatureError is a subclass; both map to the same response
            logger.debug("Rejected bearer token: %s", e)
            raise InvalidTokenError()

        user = self._users.get_by_id(user_id)
        if user is None:
            raise InvalidTokenError()

        return user.to_identity()

    def _with_token(self, user: User) -> UserWithToken:
        return UserWithToken(
            id=user.id,
            name=user.name,
            email=user.email,
            country=user.country,
            token=self._tokens.issue(user.id),
        )

    async def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = await run_in_threadpool(self._hasher.hash, "not-a-real-password")
        return self._dummy_hash
