"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Services: get_*_service() functions, *ServiceDep aliases

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        service: BlogService = Depends(get_blog_service),
        user: TokenPrincipal = Depends(get_current_user)
    ):

    # Write this:
    async def handler(service: BlogServiceDep, user: CurrentUser):

Usage:
======
    from src.api.dependencies import BlogServiceDep, CurrentUser

    @router.get("/mine")
    async def list_mine(service: BlogServiceDep, user: CurrentUser):
        return await service.list_mine(user.user_id)
"""

from src.api.dependencies.database import (
    get_db,
    DbSession,
)
from src.api.dependencies.auth import (
    get_current_user,
    get_token_service,
    CurrentUser,
)
from src.api.dependencies.services import (
    get_auth_service,
    get_blog_service,
    AuthServiceDep,
    BlogServiceDep,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_token_service",
    "CurrentUser",
    # Services
    "get_auth_service",
    "get_blog_service",
    "AuthServiceDep",
    "BlogServiceDep",
]
