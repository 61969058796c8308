"""
Activity repository for database access.

The activities table is append-only: this repository exposes no update
or delete operation.
"""

from typing import Any, Optional

from shared.repository import BaseRepository, utcnow
from .models import Activity


class ActivityRepository(BaseRepository[Activity]):
    """Repository for the activities table."""

    table_name = "activities"

    def append(
        self,
        user_id: str,
        action: str,
        title: Optional[str],
        description: Optional[str],
    ) -> Activity:
        """
        Insert a new activity row stamped with the current time.

        Returns:
            The stored Activity.
        """
        data = {
            "user_id": user_id,
            "action": action,
            "title": title,
            "description": description,
            "timestamp": utcnow().isoformat(),
        }
        result = self._table().insert(data).execute()
        return self._map_to_activity(result.data[0])

    def list_recent(self, user_id: str, limit: int) -> list[Activity]:
        """Entries for a user, newest first, at most `limit` rows."""
        result = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .order("timestamp", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_activity(row) for row in result.data]

    def _map_to_activity(self, data: dict[str, Any]) -> Activity:
        """Map database row to Activity model."""
        return Activity(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            action=data["action"],
            title=data.get("title"),
            description=data.get("description"),
            timestamp=data["timestamp"],
        )
