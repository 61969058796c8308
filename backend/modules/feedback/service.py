"""
Feedback service implementation.
"""

import logging

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .models import Feedback
from .repository import FeedbackRepository

logger = logging.getLogger(__name__)


class FeedbackService:
    """Stores and lists user feedback."""

    def __init__(self, repository: FeedbackRepository):
        self._repo = repository

    async def submit(self, user: AuthenticatedUser, feedback: str) -> Feedback:
        text = feedback.strip()
        if not text:
            raise ValidationError("Feedback is required", code="FEEDBACK_REQUIRED")
        entry = self._repo.create(user.id, text)
        logger.info("User %s left feedback %s", user.id, entry.id)
        return entry

    async def list_for_user(self, user: AuthenticatedUser) -> list[Feedback]:
        return self._repo.list_by_user(user.id)
