"""
Projects module data models.

API payloads keep the field names existing clients read
(`owner`, `createdAt`, `updatedAt`, `projectCount`) through aliases.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProjectStatus(str, Enum):
    """Project lifecycle status. The only transition is PENDING -> COMPLETED."""

    PENDING = "pending"
    COMPLETED = "completed"


class Project(BaseModel):
    """A project owned by exactly one user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Project ID")
    title: str = Field(..., description="Project title")
    description: Optional[str] = Field(None, description="Free-text description")
    owner_id: str = Field(..., alias="owner", description="ID of the owning user")
    status: ProjectStatus = Field(default=ProjectStatus.PENDING)
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @property
    def is_completed(self) -> bool:
        return self.status == ProjectStatus.COMPLETED


class CreateProjectRequest(BaseModel):
    """Request to create a project."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200, description="Project title")
    description: Optional[str] = Field(None, max_length=5000, description="Description")


class UpdateProjectRequest(BaseModel):
    """Partial update. Omitted or empty fields keep their current value."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)


class CompleteProjectResponse(BaseModel):
    """Response for marking a project completed."""

    message: str
    project: Project


class ProjectStats(BaseModel):
    """Project count and the revenue figure derived from it."""

    model_config = ConfigDict(populate_by_name=True)

    project_count: int = Field(..., alias="projectCount")
    revenue: str = Field(..., description="Formatted amount, e.g. '$150'")
