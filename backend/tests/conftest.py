"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import AsyncMock, MagicMock
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, reset_container
from modules.auth.models import User
from modules.auth.service import AuthService
from modules.notifications.models import EmailMessage
from shared.models import AuthenticatedUser
from shared.security import SecretHasher, TokenIssuer


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

TEST_USER_ID = "test-user-123"


def create_test_token(
    user_id: str = TEST_USER_ID,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to put in the subject claim
        expired: If True, creates an expired token
        secret: Signing secret (pass another value to forge a bad signature)

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(days=30)

    payload = {
        "sub": user_id,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def create_test_user(
    user_id: str = TEST_USER_ID,
    name: str = "alice",
    email: str = "alice@example.com",
    password_hash: str = "$argon2id$stored-hash",
    country: str = "India",
) -> User:
    """Helper to create a stored user record."""
    return User(
        id=user_id,
        name=name,
        email=email,
        password_hash=password_hash,
        country=country,
        created_at=datetime.now(timezone.utc),
    )


class RecordingNotifier:
    """INotifier that keeps messages in memory instead of sending them."""

    def __init__(self):
        self.messages: list[EmailMessage] = []

    def notify(self, message: EmailMessage) -> None:
        self.messages.append(message)

    @property
    def subjects(self) -> list[str]:
        return [m.subject for m in self.messages]


class FastHasher(SecretHasher):
    """
    SecretHasher with a deterministic stand-in hash.

    Keeps service tests fast; the real Argon2 path is covered in
    tests/shared/test_security.py.
    """

    def __init__(self):
        pass

    def hash(self, secret: str) -> str:
        return f"hashed::{secret}"

    def verify(self, secret_hash: str, secret: str) -> bool:
        return secret_hash == f"hashed::{secret}"


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return TEST_USER_ID


@pytest.fixture
def test_user() -> AuthenticatedUser:
    """The identity resolved from a valid test token."""
    return create_test_user().to_identity()


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(TEST_JWT_SECRET)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def hasher() -> FastHasher:
    return FastHasher()


@pytest.fixture
def user_repository() -> MagicMock:
    """UserRepository mock that knows the test user by ID."""
    repo = MagicMock()
    repo.get_by_id.side_effect = lambda user_id: (
        create_test_user() if user_id == TEST_USER_ID else None
    )
    return repo


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def app(user_repository, token_issuer, hasher, notifier):
    """
    Fresh app whose bearer auth resolves real test tokens.

    Route tests add their own service overrides on top of this one.
    """
    application = create_app()
    auth = AuthService(
        users=user_repository,
        verification=AsyncMock(),
        hasher=hasher,
        tokens=token_issuer,
        notifier=notifier,
    )
    application.dependency_overrides[get_auth_service] = lambda: auth
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
