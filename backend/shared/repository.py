"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic
from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# Postgres error codes surfaced through PostgREST
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"  # e.g. a malformed UUID in a filter


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def quote_filter_value(value: str) -> str:
    """
    Quote a value for use inside a PostgREST or_() filter string.

    Commas, dots and parentheses are filter syntax, so free-text values
    must be wrapped in double quotes with embedded quotes escaped.
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def is_api_error(error: Exception, code: str) -> bool:
    """Check whether an exception is a PostgREST APIError with the given code."""
    return isinstance(error, APIError) and error.code == code


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class ProjectRepository(BaseRepository[Project]):
            def get_by_id(self, project_id: str) -> Optional[Project]:
                result = self._db.table("projects").select("*").eq("id", project_id).execute()
                if not result.data:
                    return None
                return self._map_to_project(result.data[0])
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        """Query builder for this repository's table."""
        return self._db.table(self.table_name)

    def ping(self) -> None:
        """
        Run a one-row read against this repository's table.

        Raises whatever the client raises (connection errors, APIError),
        so callers can refuse to start against an unreachable store.
        """
        self._table().select("*").limit(1).execute()
