"""
Tests for project API endpoints.

Tests the REST endpoints for project CRUD operations.
"""

import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timezone

from api.dependencies import get_project_service
from modules.projects.exceptions import (
    ProjectAccessDeniedError,
    ProjectCompletedError,
    ProjectNotFoundError,
)
from modules.projects.models import Project, ProjectStats, ProjectStatus


@pytest.fixture
def mock_project(test_user_id) -> Project:
    """Create a mock project for testing."""
    now = datetime.now(timezone.utc)
    return Project(
        id="project-123",
        title="Launch",
        description="Ship v1",
        owner_id=test_user_id,
        status=ProjectStatus.PENDING,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mock_project_service(app) -> AsyncMock:
    service = AsyncMock()
    app.dependency_overrides[get_project_service] = lambda: service
    return service


class TestCreateProject:
    """Tests for POST /project"""

    def test_create_project_success(self, client, mock_project_service, mock_project, auth_headers, test_user):
        mock_project_service.create.return_value = mock_project

        response = client.post(
            "/project",
            json={"title": "Launch", "description": "Ship v1"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "project-123"
        assert data["status"] == "pending"
        assert data["owner"] == test_user.id
        assert "createdAt" in data
        assert "updatedAt" in data
        mock_project_service.create.assert_awaited_once_with(test_user, "Launch", "Ship v1")

    def test_create_project_missing_title(self, client, mock_project_service, auth_headers):
        response = client.post("/project", json={"description": "x"}, headers=auth_headers)

        assert response.status_code == 400
        mock_project_service.create.assert_not_awaited()

    def test_create_project_blank_title(self, client, mock_project_service, auth_headers):
        response = client.post("/project", json={"title": "   "}, headers=auth_headers)

        assert response.status_code == 400
        mock_project_service.create.assert_not_awaited()

    def test_create_project_trims_title(self, client, mock_project_service, mock_project, auth_headers, test_user):
        mock_project_service.create.return_value = mock_project

        response = client.post(
            "/project",
            json={"title": "  Launch  ", "description": " Ship v1 "},
            headers=auth_headers,
        )

        assert response.status_code == 201
        mock_project_service.create.assert_awaited_once_with(test_user, "Launch", "Ship v1")

    def test_create_project_requires_auth(self, client, mock_project_service):
        response = client.post("/project", json={"title": "Launch"})

        assert response.status_code == 401
        mock_project_service.create.assert_not_awaited()


class TestUpdateProject:
    """Tests for PATCH /project/{project_id}"""

    def test_update_project_success(self, client, mock_project_service, mock_project, auth_headers, test_user):
        mock_project_service.update.return_value = mock_project.model_copy(update={"title": "Relaunch"})

        response = client.patch(
            "/project/project-123", json={"title": "Relaunch"}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Relaunch"
        mock_project_service.update.assert_awaited_once_with(
            test_user, "project-123", "Relaunch", None
        )

    def test_update_completed_project(self, client, mock_project_service, auth_headers):
        mock_project_service.update.side_effect = ProjectCompletedError("project-123")

        response = client.patch("/project/project-123", json={"title": "x"}, headers=auth_headers)

        assert response.status_code == 403
        assert response.json()["message"] == "Cannot edit a completed project"

    def test_update_not_owner(self, client, mock_project_service, auth_headers):
        mock_project_service.update.side_effect = ProjectAccessDeniedError("project-123", "other")

        response = client.patch("/project/project-123", json={"title": "x"}, headers=auth_headers)

        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to access this project"


class TestGetProject:
    """Tests for GET /project/{project_id}"""

    def test_get_project_success(self, client, mock_project_service, mock_project, auth_headers):
        mock_project_service.get.return_value = mock_project

        response = client.get("/project/project-123", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["title"] == "Launch"

    def test_get_project_not_found(self, client, mock_project_service, auth_headers):
        mock_project_service.get.side_effect = ProjectNotFoundError("missing")

        response = client.get("/project/missing", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Project not found"


class TestDeleteProject:
    """Tests for DELETE /project/{project_id}"""

    def test_delete_project_success(self, client, mock_project_service, auth_headers, test_user):
        response = client.delete("/project/project-123", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Project deleted successfully"}
        mock_project_service.delete.assert_awaited_once_with(test_user, "project-123")

    def test_delete_not_owner(self, client, mock_project_service, auth_headers):
        mock_project_service.delete.side_effect = ProjectAccessDeniedError("project-123", "other")

        response = client.delete("/project/project-123", headers=auth_headers)

        assert response.status_code == 403


class TestCompleteProject:
    """Tests for PUT /project/{project_id}/complete"""

    def test_complete_project(self, client, mock_project_service, mock_project, auth_headers):
        completed = mock_project.model_copy(update={"status": ProjectStatus.COMPLETED})
        mock_project_service.complete.return_value = (completed, False)

        response = client.put("/project/project-123/complete", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Project marked as completed"
        assert data["project"]["status"] == "completed"

    def test_complete_already_completed(self, client, mock_project_service, mock_project, auth_headers):
        completed = mock_project.model_copy(update={"status": ProjectStatus.COMPLETED})
        mock_project_service.complete.return_value = (completed, True)

        response = client.put("/project/project-123/complete", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Project is already completed"


class TestListProjects:
    """Tests for GET /projects"""

    def test_list_projects(self, client, mock_project_service, mock_project, auth_headers):
        mock_project_service.list_for_owner.return_value = [mock_project]

        response = client.get("/projects", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["id"] == "project-123"

    def test_list_projects_empty(self, client, mock_project_service, auth_headers):
        mock_project_service.list_for_owner.return_value = []

        response = client.get("/projects", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_projects_requires_auth(self, client, mock_project_service):
        response = client.get("/projects")

        assert response.status_code == 401


class TestCountRevenue:
    """Tests for GET /projects/countrevenuepending"""

    def test_count_revenue(self, client, mock_project_service, auth_headers):
        mock_project_service.count_and_revenue.return_value = ProjectStats(
            project_count=3, revenue="$150"
        )

        response = client.get("/projects/countrevenuepending", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"projectCount": 3, "revenue": "$150"}
