"""
Project repository for database access.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import (
    BaseRepository,
    INVALID_TEXT_REPRESENTATION,
    is_api_error,
    utcnow,
)
from .models import Project, ProjectStatus


class ProjectRepository(BaseRepository[Project]):
    """
    Repository for project data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    table_name = "projects"

    def create(self, owner_id: str, title: str, description: Optional[str]) -> Project:
        """
        Create a new project in PENDING status.

        Returns:
            Created Project with generated ID and timestamps.
        """
        now = utcnow().isoformat()
        data = {
            "owner_id": owner_id,
            "title": title,
            "description": description,
            "status": ProjectStatus.PENDING.value,
            "created_at": now,
            "updated_at": now,
        }
        result = self._table().insert(data).execute()
        return self._map_to_project(result.data[0])

    def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get a project by ID. A malformed ID is treated as not found."""
        try:
            result = self._table().select("*").eq("id", project_id).execute()
        except APIError as e:
            if is_api_error(e, INVALID_TEXT_REPRESENTATION):
                return None
            raise
        if not result.data:
            return None
        return self._map_to_project(result.data[0])

    def list_by_owner(self, owner_id: str) -> list[Project]:
        result = self._table().select("*").eq("owner_id", owner_id).execute()
        return [self._map_to_project(row) for row in result.data]

    def count_by_owner(self, owner_id: str) -> int:
        result = (
            self._table()
            .select("id", count="exact")
            .eq("owner_id", owner_id)
            .execute()
        )
        return result.count or 0

    def update(self, project_id: str, fields: dict[str, Any]) -> Project:
        """
        Apply field changes and bump updated_at.

        Args:
            project_id: The project UUID.
            fields: Column values to set (title, description, status).

        Returns:
            The updated Project.
        """
        data = {**fields, "updated_at": utcnow().isoformat()}
        if isinstance(data.get("status"), ProjectStatus):
            data["status"] = data["status"].value
        result = self._table().update(data).eq("id", project_id).execute()
        return self._map_to_project(result.data[0])

    def delete(self, project_id: str) -> None:
        self._table().delete().eq("id", project_id).execute()

    def _map_to_project(self, data: dict[str, Any]) -> Project:
        """Map database row to Project model."""
        return Project(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description"),
            owner_id=str(data["owner_id"]),
            status=ProjectStatus(data["status"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
