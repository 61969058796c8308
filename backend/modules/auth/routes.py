"""
Registration and login endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.models.errors import ErrorResponse

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account.

    The email must have been verified with /verify-otp first.
    """
    user = await service.register(request)
    return AuthResponse(message="Registration successful", user=user)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}},
)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Sign in with email or name and password.
    """
    user = await service.login(request)
    return AuthResponse(message="Login successful", user=user)
