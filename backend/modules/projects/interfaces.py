"""
Projects module interface.

The API layer depends on IProjectService for all project operations.
Every operation takes the calling identity; only the owner may see or
change a project.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import Project, ProjectStats


@runtime_checkable
class IProjectService(Protocol):
    """Interface for ownership-scoped project lifecycle operations."""

    async def create(
        self,
        user: AuthenticatedUser,
        title: str,
        description: Optional[str] = None,
    ) -> Project:
        """
        Create a PENDING project owned by the user.

        Records a "Created project" activity and emails the owner.
        """
        ...

    async def update(
        self,
        user: AuthenticatedUser,
        project_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Project:
        """
        Partially update a project's title and/or description.

        Raises:
            ProjectNotFoundError: If the project does not exist
            ProjectAccessDeniedError: If the user is not the owner
            ProjectCompletedError: If the project is already completed
        """
        ...

    async def get(self, user: AuthenticatedUser, project_id: str) -> Project:
        """
        Get one project.

        Raises:
            ProjectNotFoundError: If the project does not exist
            ProjectAccessDeniedError: If the user is not the owner
        """
        ...

    async def delete(self, user: AuthenticatedUser, project_id: str) -> None:
        """
        Delete a project.

        Raises:
            ProjectNotFoundError: If the project does not exist
            ProjectAccessDeniedError: If the user is not the owner
        """
        ...

    async def complete(
        self, user: AuthenticatedUser, project_id: str
    ) -> tuple[Project, bool]:
        """
        Mark a project completed. Idempotent.

        Returns:
            (project, already_completed). When already_completed is True
            nothing was written and no activity or email was produced.

        Raises:
            ProjectNotFoundError: If the project does not exist
            ProjectAccessDeniedError: If the user is not the owner
        """
        ...

    async def list_for_owner(self, user: AuthenticatedUser) -> list[Project]:
        """All projects owned by the user, in store order."""
        ...

    async def count_and_revenue(self, user: AuthenticatedUser) -> ProjectStats:
        """Number of owned projects and the derived revenue string."""
        ...
