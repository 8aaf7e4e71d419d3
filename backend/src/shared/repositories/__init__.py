"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD with SAVEPOINT-guarded writes
         │
         ├── UserRepository             ← Credential records, email lookups
         └── BlogPostRepository         ← Posts, slug lookups, visibility queries

Usage Example:
==============
    from src.shared.repositories import UserRepository, BlogPostRepository

    async def author_posts(db: AsyncSession, email: str):
        user = await UserRepository(db).get_by_email(email)
        return await BlogPostRepository(db).list_by_author(user.id)
"""

from src.shared.repositories.base import BaseRepository
from src.shared.repositories.user_repository import UserRepository
from src.shared.repositories.blog_post_repository import BlogPostRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "BlogPostRepository",
]
