"""
Feedback endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_feedback_service
from shared.models import AuthenticatedUser

from .models import Feedback, SubmitFeedbackRequest
from .service import FeedbackService

router = APIRouter()


@router.post("", response_model=Feedback, status_code=201)
async def submit_feedback(
    request: SubmitFeedbackRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: FeedbackService = Depends(get_feedback_service),
) -> Feedback:
    return await service.submit(user, request.feedback)


@router.get("", response_model=list[Feedback])
async def list_feedback(
    user: AuthenticatedUser = Depends(get_current_user),
    service: FeedbackService = Depends(get_feedback_service),
) -> list[Feedback]:
    """The current user's feedback, newest first."""
    return await service.list_for_user(user)
