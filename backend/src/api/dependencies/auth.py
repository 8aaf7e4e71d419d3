"""
Authentication Dependencies

FastAPI dependencies for bearer-token authentication.

Dependency Hierarchy:
=====================
    bearer_scheme             ← Extract "Authorization: Bearer <token>"
           │
           ▼
    get_current_user()        ← Verify JWT with TokenService
           │
           ▼
    CurrentUser               ← TokenPrincipal(user_id, email, full_name)

A missing header and a bad token both end as AuthenticationError (401),
rendered through the standard error envelope.

Usage:
======
    from src.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user.user_id
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from src.config.settings import Settings, get_settings
from src.shared.core.exceptions import AuthenticationError
from src.shared.services.token_service import TokenPrincipal, TokenService


# auto_error=False so a missing header goes through our 401 envelope
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenService:
    """Dependency to get a TokenService bound to the current settings."""
    return TokenService(settings)


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenPrincipal:
    """
    Get current authenticated user from the bearer token.

    Args:
        credentials: Bearer token from Authorization header
        tokens: TokenService used for verification

    Returns:
        TokenPrincipal for the token's subject

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    return tokens.verify(credentials.credentials)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[TokenPrincipal, Depends(get_current_user)]
