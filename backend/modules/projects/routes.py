"""
Project API endpoints.

Provides REST endpoints for the project lifecycle. Paths match the
routes existing clients call (`/project/...` for one project,
`/projects...` for collections).
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_project_service
from api.models.errors import ErrorResponse
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IProjectService
from .models import (
    CompleteProjectResponse,
    CreateProjectRequest,
    Project,
    ProjectStats,
    UpdateProjectRequest,
)

router = APIRouter()

OWNED_PROJECT_ERRORS = {
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.post("/project", response_model=Project, status_code=201)
async def create_project(
    request: CreateProjectRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> Project:
    """
    Create a new project owned by the current user.

    The project starts in 'pending' status.
    """
    return await service.create(user, request.title, request.description)


@router.patch("/project/{project_id}", response_model=Project, responses=OWNED_PROJECT_ERRORS)
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> Project:
    """
    Update a project's title and/or description.

    Completed projects cannot be edited.
    """
    return await service.update(user, project_id, request.title, request.description)


@router.get("/project/{project_id}", response_model=Project, responses=OWNED_PROJECT_ERRORS)
async def get_project(
    project_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> Project:
    """
    Get a single project.
    """
    return await service.get(user, project_id)


@router.delete(
    "/project/{project_id}", response_model=MessageResponse, responses=OWNED_PROJECT_ERRORS
)
async def delete_project(
    project_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> MessageResponse:
    """
    Delete a project.
    """
    await service.delete(user, project_id)
    return MessageResponse(message="Project deleted successfully")


@router.put(
    "/project/{project_id}/complete",
    response_model=CompleteProjectResponse,
    responses=OWNED_PROJECT_ERRORS,
)
async def complete_project(
    project_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> CompleteProjectResponse:
    """
    Mark a project as completed.

    Completing an already completed project succeeds without changes.
    """
    project, already_completed = await service.complete(user, project_id)
    message = (
        "Project is already completed" if already_completed else "Project marked as completed"
    )
    return CompleteProjectResponse(message=message, project=project)


@router.get("/projects", response_model=list[Project])
async def list_projects(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> list[Project]:
    """
    List all projects owned by the current user.
    """
    return await service.list_for_owner(user)


@router.get("/projects/countrevenuepending", response_model=ProjectStats)
async def count_projects(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> ProjectStats:
    """
    Count the current user's projects and the revenue derived from the count.
    """
    return await service.count_and_revenue(user)
