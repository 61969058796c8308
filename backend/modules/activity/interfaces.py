"""
Activity module interface.

The projects module records its audit trail through IActivityService.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Activity


@runtime_checkable
class IActivityService(Protocol):
    """Interface for the append-only activity log."""

    async def record(
        self,
        user_id: str,
        action: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Activity:
        """
        Append an entry with a server-assigned timestamp.

        Args:
            user_id: User who performed the action
            action: Summary such as "Created project: Launch"
            title: Project title at the time of the action
            description: Project description at the time of the action

        Returns:
            The stored Activity
        """
        ...

    async def recent_for_user(self, user_id: str, limit: int = 5) -> list[Activity]:
        """
        Get a user's most recent entries, newest first.

        Args:
            user_id: Owner of the entries
            limit: Maximum number of entries to return

        Returns:
            Up to `limit` activities ordered by timestamp descending
        """
        ...
