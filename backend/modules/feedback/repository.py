"""
Feedback repository for database access.
"""

from typing import Any

from shared.repository import BaseRepository, utcnow
from .models import Feedback


class FeedbackRepository(BaseRepository[Feedback]):
    """Repository for the append-only feedback table."""

    table_name = "feedback"

    def create(self, user_id: str, feedback: str) -> Feedback:
        data = {
            "user_id": user_id,
            "feedback": feedback,
            "timestamp": utcnow().isoformat(),
        }
        result = self._table().insert(data).execute()
        return self._map_to_feedback(result.data[0])

    def list_by_user(self, user_id: str) -> list[Feedback]:
        result = (
            self._table()
            .select("*")
            .eq("user_id", user_id)
            .order("timestamp", desc=True)
            .execute()
        )
        return [self._map_to_feedback(row) for row in result.data]

    def _map_to_feedback(self, data: dict[str, Any]) -> Feedback:
        return Feedback(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            feedback=data["feedback"],
            timestamp=data["timestamp"],
        )
