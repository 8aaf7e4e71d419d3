"""
Authentication Handler

Handles user registration, login and identity endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here.

DEPENDENCY INJECTION:
=====================
Services are injected via FastAPI's Depends() mechanism, which lets tests
swap the database session and settings through dependency_overrides.
"""

from fastapi import APIRouter, status

from src.api.dependencies.auth import CurrentUser
from src.api.dependencies.services import AuthServiceDep
from src.shared.schemas.common import ErrorResponse
from src.shared.schemas.user import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
)
from src.shared.services.auth_service import AuthResult


router = APIRouter()


def _to_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        expires_at=result.expires_at,
        email=result.user.email,
        full_name=result.user.full_name,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def register(
    user_data: RegisterRequest,
    auth_service: AuthServiceDep,
):
    """
    Register a new user.

    Creates a new user account and returns authentication token.

    Args:
        user_data: Registration data (email, password, fullName)
        auth_service: Injected AuthService instance

    Returns:
        AuthResponse with the JWT and the user's display fields

    Raises:
        400: Password violates the policy or the body is invalid
        409: Email already registered
    """
    result = await auth_service.register(
        email=user_data.email,
        password=user_data.password,
        full_name=user_data.full_name,
    )
    return _to_response(result)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
):
    """
    Authenticate user and return JWT token.

    Args:
        credentials: Login credentials (email, password)
        auth_service: Injected AuthService instance

    Returns:
        AuthResponse with the JWT and the user's display fields

    Raises:
        401: If credentials are invalid
    """
    result = await auth_service.login(
        email=credentials.email,
        password=credentials.password,
    )
    return _to_response(result)


@router.get(
    "/me",
    response_model=MeResponse,
    responses={401: {"model": ErrorResponse}},
)
async def me(current_user: CurrentUser):
    """Return the identity carried by the caller's token."""
    return MeResponse(
        user_id=current_user.user_id,
        email=current_user.email,
        full_name=current_user.full_name,
    )
