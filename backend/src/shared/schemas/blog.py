"""
Blog Schemas

Request/response models for blog post endpoints.

Title and content rules (required, title length) are enforced by
BlogService so that violations come back with per-field messages.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from src.shared.models.blog_post import BlogPost
from src.shared.schemas.common import BaseSchema


class BlogCreateRequest(BaseSchema):
    """Schema for creating a post."""

    title: str
    content: str
    is_published: bool = Field(default=True, description="False saves a draft")


class BlogUpdateRequest(BlogCreateRequest):
    """Schema for replacing a post's editable fields."""

    regenerate_slug: bool = Field(
        default=False,
        description="Derive a new slug from the new title",
    )


class BlogResponse(BaseSchema):
    """
    Schema for a post with its author's display fields.

    Example:
        {
            "id": 42,
            "title": "Ben Ahmet - Kaya",
            "slug": "ben-ahmet-kaya",
            "content": "...",
            "isPublished": true,
            "createdAt": "2024-01-15T10:30:00Z",
            "updatedAt": null,
            "authorId": "550e8400-e29b-41d4-a716-446655440000",
            "authorEmail": "a@x.com",
            "authorFullName": "Ahmet Kaya"
        }
    """

    id: int
    title: str
    slug: str
    content: str
    is_published: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    author_id: UUID
    author_email: str
    author_full_name: Optional[str] = None

    @classmethod
    def from_post(cls, post: BlogPost) -> "BlogResponse":
        """Build a response from a post whose author is loaded."""
        return cls(
            id=post.id,
            title=post.title,
            slug=post.slug,
            content=post.content,
            is_published=post.is_published,
            created_at=post.created_at,
            updated_at=post.updated_at,
            author_id=post.author_id,
            author_email=post.author.email,
            author_full_name=post.author.full_name,
        )
