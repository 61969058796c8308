"""
Projects module exceptions.
"""

from shared.exceptions import AuthorizationError, NotFoundError


class ProjectNotFoundError(NotFoundError):
    """Raised when a project is not found."""

    def __init__(self, project_id: str):
        super().__init__(
            "Project not found",
            code="PROJECT_NOT_FOUND",
            details={"project_id": project_id},
        )


class ProjectAccessDeniedError(AuthorizationError):
    """Raised when a user touches a project they do not own."""

    def __init__(self, project_id: str, user_id: str):
        super().__init__(
            "Not authorized to access this project",
            code="PROJECT_ACCESS_DENIED",
            details={"project_id": project_id, "user_id": user_id},
        )


class ProjectCompletedError(AuthorizationError):
    """Raised when trying to edit a completed project."""

    def __init__(self, project_id: str):
        super().__init__(
            "Cannot edit a completed project",
            code="PROJECT_COMPLETED",
            details={"project_id": project_id},
        )
