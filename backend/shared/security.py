"""
Hashing and token primitives.

- SecretHasher: salted one-way hashing (Argon2id) for passwords and OTP codes
- TokenIssuer: signs and verifies the HS256 bearer tokens handed to clients

Neither class touches the database; services receive them by injection.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError


class SecretHasher:
    """Argon2id hashing with constant-time verification."""

    def __init__(self, hasher: Optional[PasswordHasher] = None):
        self._hasher = hasher or PasswordHasher()

    def hash(self, secret: str) -> str:
        """Hash a secret with a fresh random salt."""
        return self._hasher.hash(secret)

    def verify(self, secret_hash: str, secret: str) -> bool:
        """
        Check a plaintext secret against a stored hash.

        Returns False for a mismatch or a malformed hash rather than raising,
        so callers can collapse every failure into one error.
        """
        try:
            return self._hasher.verify(secret_hash, secret)
        except (VerificationError, InvalidHashError):
            return False


class TokenIssuer:
    """Issues and validates signed bearer tokens bound to a user id."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_days: int = 30):
        if not secret:
            raise RuntimeError(
                "Token signing secret missing. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(days=expires_days)

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """Create a signed token whose subject is the user id."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> str:
        """
        Verify a token and return the user id it was issued for.

        Raises:
            jwt.ExpiredSignatureError: If the token has expired
            jwt.InvalidTokenError: If the signature or claims are invalid
        """
        payload = jwt.decode(
            token,
            self._secret,
            algorithms=[self._algorithm],
            options={"require": ["sub", "exp"]},
        )
        return str(payload["sub"])
