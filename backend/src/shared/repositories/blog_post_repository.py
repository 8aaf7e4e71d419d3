"""
BlogPost Repository

Database operations specific to the BlogPost model.

Common Operations:
==================
- get_by_slug()      → Fetch a post by its unique slug
- list_visible()     → Published posts plus the viewer's own drafts
- list_by_author()   → All posts of one author (uses the author_id index)

Ownership is NOT checked here; BlogService decides who may read or mutate.
The author relationship is loaded eagerly with every post so responses can
include author display fields without extra queries.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.repositories.base import BaseRepository
from src.shared.models.blog_post import BlogPost


class BlogPostRepository(BaseRepository[BlogPost]):
    """
    Repository for BlogPost database operations.

    Slug uniqueness is enforced by the unique index; create() and update()
    raise DuplicateResourceError when a slug is already in use.
    """

    conflict_message = "Slug already in use"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize BlogPostRepository.

        Args:
            session: Async database session
        """
        super().__init__(BlogPost, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_id(self, post_id: int) -> Optional[BlogPost]:
        """Get a post by its numeric id."""
        return await self.get(post_id)

    async def get_by_slug(self, slug: str) -> Optional[BlogPost]:
        """
        Get a post by slug.

        Args:
            slug: Post slug (e.g. "ben-ahmet-kaya")

        Returns:
            BlogPost if found, None otherwise
        """
        result = await self.session.execute(select(BlogPost).where(BlogPost.slug == slug))
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # LIST METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_visible(self, viewer_id: UUID) -> list[BlogPost]:
        """
        List posts the viewer may see, newest first.

        Args:
            viewer_id: Authenticated user's id

        Returns:
            Published posts of every author plus the viewer's drafts

        SQL Generated:
            SELECT ... FROM blog_posts JOIN users ...
            WHERE is_published OR author_id = :viewer_id
            ORDER BY created_at DESC, id DESC
        """
        result = await self.session.execute(
            select(BlogPost)
            .where(or_(BlogPost.is_published.is_(True), BlogPost.author_id == viewer_id))
            .order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
        )
        return list(result.scalars().all())

    async def list_by_author(self, author_id: UUID) -> list[BlogPost]:
        """
        List every post of one author, drafts included, newest first.

        Args:
            author_id: Author's user id

        Returns:
            List of BlogPost
        """
        result = await self.session.execute(
            select(BlogPost)
            .where(BlogPost.author_id == author_id)
            .order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
        )
        return list(result.scalars().all())
