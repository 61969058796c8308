"""
User repository for database access (the credential store).

Encapsulates all Supabase queries against the users table. Email and
name are both unique at the database level.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import (
    BaseRepository,
    INVALID_TEXT_REPRESENTATION,
    UNIQUE_VIOLATION,
    is_api_error,
    quote_filter_value,
)
from .exceptions import UserAlreadyExistsError
from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for user records.

    Note: This repository does NOT hash passwords. The service layer
    passes an already-hashed value.
    """

    table_name = "users"

    def create(self, name: str, email: str, password_hash: str, country: str) -> User:
        """
        Insert a new user.

        Raises:
            UserAlreadyExistsError: If the insert hits the email or name
                unique constraint (e.g. a concurrent registration).
        """
        data = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "country": country,
        }
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if is_api_error(e, UNIQUE_VIOLATION):
                raise UserAlreadyExistsError() from e
            raise
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        try:
            result = self._table().select("*").eq("id", user_id).execute()
        except APIError as e:
            if is_api_error(e, INVALID_TEXT_REPRESENTATION):
                return None
            raise
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        result = self._table().select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def find_by_email_or_name(self, email: str, name: str) -> Optional[User]:
        """Find a user whose email OR name matches, in a single query."""
        result = (
            self._table()
            .select("*")
            .or_(f"email.eq.{quote_filter_value(email)},name.eq.{quote_filter_value(name)}")
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def find_by_identifier(self, identifier: str) -> Optional[User]:
        """Find a user by login identifier, which may be an email or a name."""
        return self.find_by_email_or_name(identifier, identifier)

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["password_hash"],
            country=data.get("country") or "",
            created_at=data.get("created_at"),
        )
