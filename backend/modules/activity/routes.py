"""
Activity API endpoints.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_activity_service
from shared.models import AuthenticatedUser

from .interfaces import IActivityService
from .models import Activity
from .service import DEFAULT_RECENT_LIMIT

router = APIRouter()


@router.get("/recent", response_model=list[Activity])
async def recent_activity(
    limit: int = Query(
        default=DEFAULT_RECENT_LIMIT, ge=1, le=50, description="Maximum entries to return"
    ),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IActivityService = Depends(get_activity_service),
) -> list[Activity]:
    """
    Get the current user's most recent actions, newest first.
    """
    return await service.recent_for_user(user.id, limit)
