"""
Verification repositories for database access.

- otp_records: one row per email holding the current code hash
- verified_emails: one row per email that passed verification

Both tables are keyed by email, so writes are upserts.
"""

from datetime import datetime
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import OtpRecord, VerifiedEmail


class OtpRepository(BaseRepository[OtpRecord]):
    """Repository for pending one-time codes."""

    table_name = "otp_records"

    def upsert(self, email: str, code_hash: str, expires_at: datetime) -> OtpRecord:
        """Store a code for the email, replacing any previous one."""
        data = {
            "email": email,
            "code_hash": code_hash,
            "expires_at": expires_at.isoformat(),
        }
        result = self._table().upsert(data, on_conflict="email").execute()
        return self._map_to_record(result.data[0])

    def get(self, email: str) -> Optional[OtpRecord]:
        result = self._table().select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def delete(self, email: str) -> None:
        self._table().delete().eq("email", email).execute()

    def _map_to_record(self, data: dict[str, Any]) -> OtpRecord:
        return OtpRecord(
            email=data["email"],
            code_hash=data["code_hash"],
            expires_at=data["expires_at"],
        )


class VerifiedEmailRepository(BaseRepository[VerifiedEmail]):
    """Repository for emails that passed OTP verification."""

    table_name = "verified_emails"

    def upsert(self, email: str, verified_at: datetime, expires_at: datetime) -> VerifiedEmail:
        data = {
            "email": email,
            "verified_at": verified_at.isoformat(),
            "expires_at": expires_at.isoformat(),
        }
        result = self._table().upsert(data, on_conflict="email").execute()
        return self._map_to_verified(result.data[0])

    def get(self, email: str) -> Optional[VerifiedEmail]:
        result = self._table().select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_verified(result.data[0])

    def delete(self, email: str) -> None:
        self._table().delete().eq("email", email).execute()

    def _map_to_verified(self, data: dict[str, Any]) -> VerifiedEmail:
        return VerifiedEmail(
            email=data["email"],
            verified_at=data["verified_at"],
            expires_at=data["expires_at"],
        )
