"""
User Entity Model

Represents a registered application user.

The record is deliberately plain: an id, an email, and a password hash.
No framework identity base class is involved.

Model Hierarchy:
================
    User
       └── posts (BlogPost[]) - Posts authored by this user

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ email            │ "Ahmet@Example.com"                                       │
│ normalized_email │ "ahmet@example.com"                                       │
│ password_hash    │ "$2b$12$..."                                              │
│ full_name        │ "Ahmet Kaya"                                              │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ NULL                                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from src.shared.models.blog_post import BlogPost


def normalize_email(email: str) -> str:
    """Canonical form used for uniqueness and lookups (case-insensitive)."""
    return email.strip().lower()


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        email: Email address as the user typed it
        normalized_email: Lower-cased email (unique, indexed)
        password_hash: bcrypt hash, never the raw password
        full_name: Optional display name

    Relationships:
        posts: All blog posts written by this user
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Unique constraint lives here so concurrent registrations have one winner
    normalized_email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    full_name: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    posts: Mapped[list["BlogPost"]] = relationship(
        "BlogPost",
        back_populates="author",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email})>"
