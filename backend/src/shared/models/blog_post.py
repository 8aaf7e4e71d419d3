"""
BlogPost Entity Model

A blog post owned by exactly one author.

SAMPLE POST RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 42                                                        │
│ title            │ "Ben Ahmet - Kaya"                                        │
│ slug             │ "ben-ahmet-kaya"                                          │
│ content          │ "..."                                                     │
│ is_published     │ true                                                      │
│ author_id        │ 550e8400-e29b-41d4-a716-446655440000                      │
│ created_at       │ 2024-01-15T10:30:00Z                                      │
│ updated_at       │ NULL                                                      │
└──────────────────────────────────────────────────────────────────────────────┘

Indexes:
========
- slug: UNIQUE across every post (drafts included)
- author_id: secondary index for "posts by author" queries
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, Uuid, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from src.shared.models.user import User


TITLE_MAX_LENGTH = 180
SLUG_MAX_LENGTH = 200


class BlogPost(Base, TimestampMixin):
    """
    Blog post written by a user.

    Attributes:
        id: Auto-incrementing identifier
        title: Post title (1..180 chars)
        slug: URL-safe identifier derived from the title at creation
        content: Post body
        is_published: Drafts are only visible to their author
        author_id: Owning user (immutable)

    Relationships:
        author: The owning User, always loaded with the post
    """

    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
    )

    slug: Mapped[str] = mapped_column(
        String(SLUG_MAX_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    is_published: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Joined eagerly so author display fields never trigger lazy IO in async code
    author: Mapped["User"] = relationship(
        "User",
        back_populates="posts",
        lazy="joined",
        innerjoin=True,
    )

    def is_visible_to(self, viewer_id: uuid.UUID) -> bool:
        """Published posts are visible to everyone; drafts only to the author."""
        return self.is_published or self.author_id == viewer_id

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<BlogPost(id={self.id}, slug={self.slug})>"
