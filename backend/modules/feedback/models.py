"""
Feedback module data models.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class Feedback(BaseModel):
    """Free-text feedback left by a user."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    user_id: str = Field(..., alias="user")
    feedback: str
    timestamp: datetime


class SubmitFeedbackRequest(BaseModel):
    feedback: str = Field(..., min_length=1, max_length=5000)
