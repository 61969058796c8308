"""
Project lifecycle service implementation.

Every read or write of a single project goes through _get_owned_project,
so ownership is checked the same way for get, update, delete and complete.
Each mutation is followed by an activity record and a queued email to the
owner, in that order, after the project write has succeeded.
"""

import logging
from typing import Any, Optional

from modules.activity.interfaces import IActivityService
from modules.notifications.interfaces import INotifier
from modules.notifications.templates import (
    project_completed_email,
    project_created_email,
    project_deleted_email,
    project_updated_email,
)
from shared.models import AuthenticatedUser

from .exceptions import (
    ProjectAccessDeniedError,
    ProjectCompletedError,
    ProjectNotFoundError,
)
from .interfaces import IProjectService
from .models import Project, ProjectStats, ProjectStatus
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService(IProjectService):
    """
    Project service with Supabase backend.

    Implements IProjectService with real database operations.
    """

    def __init__(
        self,
        repository: ProjectRepository,
        activity: IActivityService,
        notifier: INotifier,
        frontend_url: str = "http://localhost:5173",
        revenue_per_project: int = 50,
        currency_symbol: str = "$",
    ):
        self._repo = repository
        self._activity = activity
        self._notifier = notifier
        self._frontend_url = frontend_url.rstrip("/")
        self._revenue_per_project = revenue_per_project
        self._currency_symbol = currency_symbol

    async def create(
        self,
        user: AuthenticatedUser,
        title: str,
        description: Optional[str] = None,
    ) -> Project:
        project = self._repo.create(user.id, title, description)
        logger.debug("User %s created project %s", user.id, project.id)

        await self._activity.record(
            user.id, f"Created project: {title}", title, description
        )
        self._notifier.notify(
            project_created_email(user.email, user.name, title, self._frontend_url)
        )
        return project

    async def update(
        self,
        user: AuthenticatedUser,
        project_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Project:
        project = self._get_owned_project(project_id, user)

        if project.is_completed:
            raise ProjectCompletedError(project_id)

        fields: dict[str, Any] = {}
        if title and title.strip():
            fields["title"] = title.strip()
        if description and description.strip():
            fields["description"] = description.strip()

        updated = self._repo.update(project_id, fields)
        logger.debug("User %s updated project %s", user.id, project_id)

        await self._activity.record(
            user.id,
            f"Updated project: {updated.title}",
            updated.title,
            updated.description,
        )
        self._notifier.notify(
            project_updated_email(
                user.email, user.name, updated.title, updated.id, self._frontend_url
            )
        )
        return updated

    async def get(self, user: AuthenticatedUser, project_id: str) -> Project:
        return self._get_owned_project(project_id, user)

    async def delete(self, user: AuthenticatedUser, project_id: str) -> None:
        project = self._get_owned_project(project_id, user)

        self._repo.delete(project_id)
        logger.debug("User %s deleted project %s", user.id, project_id)

        await self._activity.record(
            user.id,
            f"Deleted project: {project.title}",
            project.title,
            project.description,
        )
        self._notifier.notify(project_deleted_email(user.email, user.name, project.title))

    async def complete(
        self, user: AuthenticatedUser, project_id: str
    ) -> tuple[Project, bool]:
        project = self._get_owned_project(project_id, user)

        if project.is_completed:
            return project, True

        completed = self._repo.update(project_id, {"status": ProjectStatus.COMPLETED})
        logger.debug("User %s completed project %s", user.id, project_id)

        await self._activity.record(
            user.id,
            f"Marked project as completed: {completed.title}",
            completed.title,
            completed.description,
        )
        self._notifier.notify(
            project_completed_email(user.email, user.name, completed.title)
        )
        return completed, False

    async def list_for_owner(self, user: AuthenticatedUser) -> list[Project]:
        return self._repo.list_by_owner(user.id)

    async def count_and_revenue(self, user: AuthenticatedUser) -> ProjectStats:
        count = self._repo.count_by_owner(user.id)
        revenue = count * self._revenue_per_project
        return ProjectStats(
            project_count=count,
            revenue=f"{self._currency_symbol}{revenue}",
        )

    def _get_owned_project(self, project_id: str, user: AuthenticatedUser) -> Project:
        """Load a project and make sure the caller owns it."""
        project = self._repo.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        if project.owner_id != user.id:
            raise ProjectAccessDeniedError(project_id, user.id)
        return project
