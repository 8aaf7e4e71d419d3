"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with the request's db session
and the application Settings. Services are created per-request, which is
fine because:
- Services only hold a session reference and immutable settings
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from src.api.dependencies.services import AuthServiceDep

    @router.post("/register")
    async def register(data: RegisterRequest, auth_service: AuthServiceDep):
        return await auth_service.register(data.email, data.password, data.full_name)
"""

from typing import Annotated

from fastapi import Depends

from src.api.dependencies.database import DbSession
from src.config.settings import Settings, get_settings
from src.shared.services.auth_service import AuthService
from src.shared.services.blog_service import BlogService


async def get_auth_service(
    db: DbSession,
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db, settings)


async def get_blog_service(
    db: DbSession,
    settings: Annotated[Settings, Depends(get_settings)],
) -> BlogService:
    """
    Dependency to get BlogService instance.
    """
    return BlogService(db, settings)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
