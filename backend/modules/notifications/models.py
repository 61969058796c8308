"""
Notifications module data models.
"""

from enum import Enum
from pydantic import BaseModel, Field


class EmailMessage(BaseModel):
    """A rendered transactional email ready for delivery."""

    to: str = Field(..., description="Recipient address")
    subject: str = Field(..., description="Subject line")
    html: str = Field(..., description="HTML body")

    model_config = {"frozen": True}


class AnnouncementType(str, Enum):
    """Visual category of an announcement in the client."""

    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"


class Announcement(BaseModel):
    """An entry in the global announcement feed."""

    title: str
    message: str
    type: AnnouncementType
