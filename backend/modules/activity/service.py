"""
Activity log service implementation.
"""

import logging
from typing import Optional

from .interfaces import IActivityService
from .models import Activity
from .repository import ActivityRepository

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 5


class ActivityService(IActivityService):
    """Append-only activity log backed by ActivityRepository."""

    def __init__(self, repository: ActivityRepository):
        self._repo = repository

    async def record(
        self,
        user_id: str,
        action: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Activity:
        activity = self._repo.append(user_id, action, title, description)
        logger.debug("Recorded activity for user %s: %s", user_id, action)
        return activity

    async def recent_for_user(
        self, user_id: str, limit: int = DEFAULT_RECENT_LIMIT
    ) -> list[Activity]:
        if limit < 1:
            return []
        return self._repo.list_recent(user_id, limit)
