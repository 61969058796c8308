"""
Activity module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Activity(BaseModel):
    """
    Immutable audit entry describing one mutating action on a project.

    Serialized with the field name existing clients read (`user`),
    while Python code uses `user_id`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Activity ID")
    user_id: str = Field(..., alias="user", description="User who performed the action")
    action: str = Field(..., description="Human-readable summary, e.g. 'Created project: X'")
    title: Optional[str] = Field(None, description="Project title at the time of the action")
    description: Optional[str] = Field(None, description="Project description at the time of the action")
    timestamp: datetime = Field(..., description="Server-assigned time of the action")
