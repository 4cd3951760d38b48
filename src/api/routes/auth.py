"""Demo session endpoints."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_user, get_sessions
from src.application.dto.mappers import user_to_response
from src.application.dto.requests import LoginRequest
from src.application.dto.responses import ErrorResponse, UserResponse
from src.core.entities.user import User
from src.core.services.session import SessionService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(
    request: LoginRequest,
    sessions: SessionService = Depends(get_sessions),
) -> UserResponse:
    """
    Log in as one of the demo users.

    Send the returned email in the session header on later requests.
    """
    user = sessions.login(request.email, request.password)
    return user_to_response(user)


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
)
async def me(user: User = Depends(get_current_user)) -> UserResponse:
    """Current session user."""
    return user_to_response(user)
