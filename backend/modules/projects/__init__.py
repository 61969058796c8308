"""
Projects module.

Handles the ownership-scoped project lifecycle.

Public API:
- IProjectService: Interface for project operations
- Project: A project record
- ProjectStatus: pending / completed
"""

from .interfaces import IProjectService
from .models import (
    Project,
    ProjectStatus,
    ProjectStats,
    CreateProjectRequest,
    UpdateProjectRequest,
    CompleteProjectResponse,
)
from .exceptions import (
    ProjectNotFoundError,
    ProjectAccessDeniedError,
    ProjectCompletedError,
)

__all__ = [
    # Interface
    "IProjectService",
    # Models
    "Project",
    "ProjectStatus",
    "ProjectStats",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "CompleteProjectResponse",
    # Exceptions
    "ProjectNotFoundError",
    "ProjectAccessDeniedError",
    "ProjectCompletedError",
]
