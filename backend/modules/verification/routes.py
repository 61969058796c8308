"""
Email verification endpoints.

Public (no bearer token): these run before an account exists.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_verification_service
from api.models.errors import ErrorResponse
from shared.models import MessageResponse

from .interfaces import IVerificationService
from .models import SendOtpRequest, VerifyOtpRequest

router = APIRouter()


@router.post(
    "/send-otp",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
)
async def send_otp(
    request: SendOtpRequest,
    service: IVerificationService = Depends(get_verification_service),
) -> MessageResponse:
    """
    Email a six-digit verification code, valid for 10 minutes.

    Requesting again replaces the previous code.
    """
    await service.request_otp(request.email)
    return MessageResponse(message="OTP sent")


@router.post(
    "/verify-otp",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def verify_otp(
    request: VerifyOtpRequest,
    service: IVerificationService = Depends(get_verification_service),
) -> MessageResponse:
    """
    Verify a code. On success the email may be used to register.
    """
    await service.verify_otp(request.email, request.otp)
    return MessageResponse(message="OTP verified")
