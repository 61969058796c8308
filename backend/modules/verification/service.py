"""
Email verification service implementation.

Issues six-digit codes, stores only their Argon2 hash, and promotes an
email to the verified list once the right code comes back in time.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable

from fastapi.concurrency import run_in_threadpool

from modules.auth.repository import UserRepository
from modules.notifications.interfaces import INotifier
from modules.notifications.templates import otp_email
from shared.repository import utcnow
from shared.security import SecretHasher

from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidOrExpiredOtpError,
    OtpNotFoundError,
)
from .interfaces import IVerificationService
from .repository import OtpRepository, VerifiedEmailRepository

logger = logging.getLogger(__name__)


def generate_otp(length: int = 6) -> str:
    """Uniformly random numeric code with no leading zero (100000-999999 for 6)."""
    low = 10 ** (length - 1)
    return str(low + secrets.randbelow(9 * low))


class VerificationService(IVerificationService):
    """
    OTP handshake backed by Supabase tables.

    The clock is injectable so expiry can be tested without sleeping.
    """

    def __init__(
        self,
        otps: OtpRepository,
        verified: VerifiedEmailRepository,
        users: UserRepository,
        hasher: SecretHasher,
        notifier: INotifier,
        otp_length: int = 6,
        otp_ttl_minutes: int = 10,
        verified_ttl_hours: int = 72,
        support_email: str = "support@tasktracker.com",
        clock: Callable[[], datetime] = utcnow,
    ):
        self._otps = otps
        self._verified = verified
        self._users = users
        self._hasher = hasher
        self._notifier = notifier
        self._otp_length = otp_length
        self._otp_ttl = timedelta(minutes=otp_ttl_minutes)
        self._verified_ttl = timedelta(hours=verified_ttl_hours)
        self._support_email = support_email
        self._clock = clock

    async def request_otp(self, email: str) -> None:
        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        code = generate_otp(self._otp_length)
        expires_at = self._clock() + self._otp_ttl
        code_hash = await run_in_threadpool(self._hasher.hash, code)
        self._otps.upsert(email, code_hash, expires_at)
        logger.info("Issued verification code for %s", email)

        self._notifier.notify(
            otp_email(
                email,
                code,
                ttl_minutes=int(self._otp_ttl.total_seconds() // 60),
                support_email=self._support_email,
            )
        )

    async def verify_otp(self, email: str, code: str) -> None:
        record = self._otps.get(email)
        if record is None:
            raise OtpNotFoundError(email)

        matches = await run_in_threadpool(self._hasher.verify, record.code_hash, code.strip())
        now = self._clock()
        if not matches or record.is_expired(now):
            logger.info("Rejected verification code for %s", email)
            raise InvalidOrExpiredOtpError()

        self._verified.upsert(email, verified_at=now, expires_at=now + self._verified_ttl)
        self._otps.delete(email)
        logger.info("Verified email %s", email)

    async def is_verified(self, email: str) -> bool:
        verified = self._verified.get(email)
        return verified is not None and not verified.is_expired(self._clock())

    async def consume_verification(self, email: str) -> None:
        self._verified.delete(email)
