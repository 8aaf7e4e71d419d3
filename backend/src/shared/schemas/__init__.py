"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error and health responses
- user: Registration, login and identity schemas
- blog: Post request and response schemas

Usage:
======
    from src.shared.schemas.user import RegisterRequest, AuthResponse
    from src.shared.schemas.blog import BlogCreateRequest, BlogResponse
"""

from src.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from src.shared.schemas.user import (
    RegisterRequest,
    LoginRequest,
    AuthResponse,
    MeResponse,
)
from src.shared.schemas.blog import (
    BlogCreateRequest,
    BlogUpdateRequest,
    BlogResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "MeResponse",
    # Blog
    "BlogCreateRequest",
    "BlogUpdateRequest",
    "BlogResponse",
]
