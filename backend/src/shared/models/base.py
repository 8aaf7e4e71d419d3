"""
Base Model Classes

The declarative base and the timestamp mixin shared by all Yobo models.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← created_at (set once) / updated_at (set on mutation)

Usage:
======
    from src.shared.models.base import Base, TimestampMixin

    class BlogPost(Base, TimestampMixin):
        __tablename__ = "blog_posts"
        id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Models use only portable column types so the same metadata runs on
    PostgreSQL in production and SQLite in tests.
    """


class TimestampMixin:
    """
    Mixin that adds timestamp tracking to models.

    - created_at: Set once when the record is inserted, never changed
    - updated_at: NULL until the first mutation; services stamp it on every
      update so "never edited" stays distinguishable

    Example values:
        created_at: 2024-01-15T10:30:00Z
        updated_at: None                  (never edited)
        updated_at: 2024-01-16T14:45:30Z  (last modification time)
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
