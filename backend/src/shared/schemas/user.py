"""
User Schemas

Request/response models for user and authentication endpoints.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from src.shared.schemas.common import BaseSchema


class RegisterRequest(BaseSchema):
    """Schema for user registration."""

    email: EmailStr
    password: str = Field(
        min_length=1,
        description="Password (checked against the configured password policy)",
    )
    full_name: Optional[str] = Field(
        default=None,
        max_length=100,
        description="Display name",
    )


class LoginRequest(BaseSchema):
    """Schema for user login."""

    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(BaseSchema):
    """
    Schema for authentication response.

    Example:
        {
            "token": "eyJhbGciOi...",
            "expiresAt": "2024-01-15T11:30:00Z",
            "email": "a@x.com",
            "fullName": "Ahmet Kaya"
        }
    """

    token: str
    expires_at: datetime
    email: str
    full_name: Optional[str] = None


class MeResponse(BaseSchema):
    """Identity carried by the caller's token."""

    user_id: UUID
    email: str
    full_name: Optional[str] = None
