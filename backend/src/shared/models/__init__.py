"""
Yobo SQLAlchemy Models

Model Hierarchy:
================
    User
       └── posts (BlogPost[])

Models Overview:
================
- Base: Declarative base and timestamp mixin
- User: Registered application user (credential record)
- BlogPost: Author-owned blog post with a globally unique slug

Usage:
======
    from src.shared.models import User, BlogPost
"""

from src.shared.models.base import Base, TimestampMixin, utc_now
from src.shared.models.user import User, normalize_email
from src.shared.models.blog_post import BlogPost, TITLE_MAX_LENGTH, SLUG_MAX_LENGTH

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "utc_now",
    # Models
    "User",
    "BlogPost",
    # Helpers and limits
    "normalize_email",
    "TITLE_MAX_LENGTH",
    "SLUG_MAX_LENGTH",
]
