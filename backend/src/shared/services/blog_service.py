"""
Blog Service

Business logic for blog posts: validation, slug allocation, ownership and
draft visibility.

Slug Allocation:
================
    title "Ben Ahmet"  ──to_slug──▶  "ben-ahmet"
                                        │
        INSERT slug="ben-ahmet"   ──taken──▶  INSERT slug="ben-ahmet-2"  ──taken──▶ ...
                │ ok                                  │ ok
                ▼                                     ▼
             created                               created

    Each INSERT runs in its own SAVEPOINT (see BaseRepository), so a collision
    does not poison the request transaction. After SLUG_MAX_ATTEMPTS the
    request fails with ConflictError.

Access Rules:
=============
    read    published: any authenticated viewer; draft: author only (others get 404)
    update  author only (others get 403)
    delete  author only (others get 403)

Usage:
======
    from src.shared.services.blog_service import BlogService

    service = BlogService(db, settings)
    post = await service.create(author_id=user.id, title="Ben Ahmet - Kaya", content="...")
    post.slug  # "ben-ahmet-kaya"
"""

import secrets
from typing import Iterator, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import Settings
from src.shared.core.exceptions import (
    AuthorizationError,
    ConflictError,
    DuplicateResourceError,
    PostNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from src.shared.core.logging import get_logger
from src.shared.models.base import utc_now
from src.shared.models.blog_post import TITLE_MAX_LENGTH, BlogPost
from src.shared.repositories.blog_post_repository import BlogPostRepository
from src.shared.repositories.user_repository import UserRepository
from src.shared.utils.slug import to_slug, with_suffix


logger = get_logger("blog")

# Path segments under /api/blog that would shadow GET /{slug}
RESERVED_SLUGS = frozenset({"mine"})


class BlogService:
    """
    Service for blog post operations.

    Attributes:
        session: Database session
        posts: BlogPostRepository instance
        users: UserRepository instance
        slug_max_attempts: Slug candidates tried before giving up
    """

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        """
        Initialize BlogService.

        Args:
            session: Async database session
            settings: Application settings
        """
        self.session = session
        self.posts = BlogPostRepository(session)
        self.users = UserRepository(session)
        self.slug_max_attempts = settings.SLUG_MAX_ATTEMPTS

    # ═══════════════════════════════════════════════════════════════════════════
    # COMMANDS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(
        self,
        author_id: UUID,
        title: str,
        content: str,
        is_published: bool = True,
    ) -> BlogPost:
        """
        Create a post with a unique slug derived from its title.

        Args:
            author_id: Authenticated author's id
            title: Post title
            content: Post body
            is_published: False to save as a draft

        Returns:
            The created BlogPost with its author loaded

        Raises:
            ValidationError: Title or content invalid
            UserNotFoundError: Author does not exist
            ConflictError: No free slug within SLUG_MAX_ATTEMPTS
        """
        title = self._validate(title, content)

        if not await self.users.exists(author_id):
            raise UserNotFoundError(str(author_id))

        base = self._base_slug(title)
        for attempt, candidate in self._slug_candidates(base):
            try:
                post = await self.posts.create(
                    title=title,
                    slug=candidate,
                    content=content,
                    is_published=is_published,
                    author_id=author_id,
                    created_at=utc_now(),
                )
            except DuplicateResourceError:
                logger.debug("Slug taken", slug=candidate, attempt=attempt)
                continue

            logger.info(
                "Post created",
                post_id=post.id,
                slug=post.slug,
                author_id=str(author_id),
                is_published=is_published,
            )
            return post

        logger.warning("Slug allocation exhausted", base=base, attempts=self.slug_max_attempts)
        raise ConflictError("Could not allocate a unique slug")

    async def update(
        self,
        requester_id: UUID,
        post_id: int,
        title: str,
        content: str,
        is_published: bool = True,
        regenerate_slug: bool = False,
    ) -> BlogPost:
        """
        Replace a post's title, content and publication flag.

        The slug is kept unless regenerate_slug is set; a regenerated slug
        goes through the same collision handling as create().

        Args:
            requester_id: Authenticated user's id
            post_id: Post to update
            title: New title
            content: New body
            is_published: New publication flag
            regenerate_slug: Derive a fresh slug from the new title

        Returns:
            The updated BlogPost

        Raises:
            PostNotFoundError: No post with that id
            AuthorizationError: Requester is not the author
            ValidationError: Title or content invalid
            ConflictError: No free slug within SLUG_MAX_ATTEMPTS
        """
        await self._get_owned(requester_id, post_id)
        title = self._validate(title, content)

        changes = {
            "title": title,
            "content": content,
            "is_published": is_published,
        }

        if not regenerate_slug:
            updated = await self.posts.update(post_id, updated_at=utc_now(), **changes)
            self._log_update(updated, requester_id)
            return updated

        base = self._base_slug(title)
        for attempt, candidate in self._slug_candidates(base):
            try:
                updated = await self.posts.update(
                    post_id,
                    slug=candidate,
                    updated_at=utc_now(),
                    **changes,
                )
            except DuplicateResourceError:
                logger.debug("Slug taken", slug=candidate, attempt=attempt)
                continue

            self._log_update(updated, requester_id)
            return updated

        logger.warning("Slug allocation exhausted", base=base, attempts=self.slug_max_attempts)
        raise ConflictError("Could not allocate a unique slug")

    async def delete(self, requester_id: UUID, post_id: int) -> None:
        """
        Delete a post owned by the requester.

        Raises:
            PostNotFoundError: No post with that id
            AuthorizationError: Requester is not the author
        """
        post = await self._get_owned(requester_id, post_id)
        await self.posts.delete(post.id)
        logger.info("Post deleted", post_id=post_id, author_id=str(requester_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # QUERIES
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_visible(self, viewer_id: UUID) -> list[BlogPost]:
        """Published posts plus the viewer's drafts, newest first."""
        return await self.posts.list_visible(viewer_id)

    async def list_mine(self, viewer_id: UUID) -> list[BlogPost]:
        """All of the viewer's own posts, drafts included."""
        return await self.posts.list_by_author(viewer_id)

    async def get_by_slug(self, viewer_id: UUID, slug: str) -> BlogPost:
        """
        Fetch a post by slug.

        Raises:
            PostNotFoundError: Absent, or a draft of another author
        """
        post = await self.posts.get_by_slug(slug)
        return self._visible_or_404(post, viewer_id, slug, lookup_field="slug")

    async def get_by_id(self, viewer_id: UUID, post_id: int) -> BlogPost:
        """
        Fetch a post by id.

        Raises:
            PostNotFoundError: Absent, or a draft of another author
        """
        post = await self.posts.get_by_id(post_id)
        return self._visible_or_404(post, viewer_id, str(post_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════════════════════

    def _validate(self, title: Optional[str], content: Optional[str]) -> str:
        """
        Check title and content.

        Returns:
            The stripped title

        Raises:
            ValidationError: With one message per invalid field
        """
        errors: dict[str, str] = {}
        title = (title or "").strip()

        if not title:
            errors["title"] = "Title is required"
        elif len(title) > TITLE_MAX_LENGTH:
            errors["title"] = f"Title must be at most {TITLE_MAX_LENGTH} characters"

        if not content or not content.strip():
            errors["content"] = "Content is required"

        if errors:
            raise ValidationError("Invalid post", details={"errors": errors})
        return title

    @staticmethod
    def _base_slug(title: str) -> str:
        # Titles made only of symbols or emoji slugify to ""
        return to_slug(title) or f"post-{secrets.token_hex(4)}"

    def _slug_candidates(self, base: str) -> Iterator[tuple[int, str]]:
        # Reserved words count as taken: "mine" is offered as "mine-2"
        for attempt in range(1, self.slug_max_attempts + 1):
            candidate = with_suffix(base, attempt)
            if candidate in RESERVED_SLUGS:
                continue
            yield attempt, candidate

    async def _get_owned(self, requester_id: UUID, post_id: int) -> BlogPost:
        post = await self.posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(str(post_id))

        if post.author_id != requester_id:
            logger.info(
                "Post mutation forbidden",
                post_id=post_id,
                requester_id=str(requester_id),
            )
            raise AuthorizationError("You can only modify your own posts")
        return post

    @staticmethod
    def _visible_or_404(
        post: Optional[BlogPost],
        viewer_id: UUID,
        ref: str,
        lookup_field: str = "id",
    ) -> BlogPost:
        if post is None or not post.is_visible_to(viewer_id):
            raise PostNotFoundError(ref, lookup_field=lookup_field)
        return post

    @staticmethod
    def _log_update(post: BlogPost, requester_id: UUID) -> None:
        logger.info(
            "Post updated",
            post_id=post.id,
            slug=post.slug,
            author_id=str(requester_id),
        )
