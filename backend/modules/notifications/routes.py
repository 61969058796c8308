"""
Announcement feed endpoint.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .models import Announcement, AnnouncementType

router = APIRouter()

ANNOUNCEMENTS: list[Announcement] = [
    Announcement(
        title="Project for UP",
        message="New project is available for Client A",
        type=AnnouncementType.INFO,
    ),
    Announcement(
        title="Project for Mumbai",
        message="New project is available for Client B",
        type=AnnouncementType.WARNING,
    ),
    Announcement(
        title="Project for Pune",
        message="New project is available for Client C",
        type=AnnouncementType.SUCCESS,
    ),
]


@router.get("/notification", response_model=list[Announcement])
async def list_announcements(
    user: AuthenticatedUser = Depends(get_current_user),
) -> list[Announcement]:
    """Global announcements shown to every signed-in user."""
    return ANNOUNCEMENTS
