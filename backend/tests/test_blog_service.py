"""Tests for BlogService: slugs, ownership and draft visibility."""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import Settings
from src.shared.core.exceptions import (
    AuthorizationError,
    ConflictError,
    PostNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from src.shared.models.blog_post import TITLE_MAX_LENGTH
from src.shared.models.user import User
from src.shared.services.auth_service import AuthService
from src.shared.services.blog_service import BlogService


@pytest.fixture
def blog_service(session: AsyncSession, test_settings: Settings) -> BlogService:
    return BlogService(session, test_settings)


@pytest.fixture
async def author(session: AsyncSession, test_settings: Settings) -> User:
    result = await AuthService(session, test_settings).register("a@x.com", "Secret123!", "Ahmet Kaya")
    return result.user


@pytest.fixture
async def reader(session: AsyncSession, test_settings: Settings) -> User:
    result = await AuthService(session, test_settings).register("b@x.com", "Secret123!", "Berk")
    return result.user


class TestCreate:
    async def test_slug_is_derived_from_title(self, blog_service, author):
        post = await blog_service.create(author.id, "Ben Ahmet - Kaya", "Merhaba")

        assert post.slug == "ben-ahmet-kaya"
        assert post.is_published is True
        assert post.author.email == "a@x.com"
        assert post.created_at is not None
        assert post.updated_at is None

    async def test_colliding_slugs_get_numbered(self, blog_service, author):
        first = await blog_service.create(author.id, "Ben Ahmet", "one")
        second = await blog_service.create(author.id, "ben ahmet!", "two")
        third = await blog_service.create(author.id, "BEN AHMET", "three")

        assert [first.slug, second.slug, third.slug] == ["ben-ahmet", "ben-ahmet-2", "ben-ahmet-3"]

    async def test_symbol_only_title_gets_fallback_slug(self, blog_service, author):
        post = await blog_service.create(author.id, "🎉🎉🎉", "party")

        assert post.slug.startswith("post-")
        assert len(post.slug) == len("post-") + 8

    async def test_title_is_stripped(self, blog_service, author):
        post = await blog_service.create(author.id, "   Hello   ", "body")

        assert post.title == "Hello"

    async def test_blank_title_and_content_are_rejected(self, blog_service, author):
        with pytest.raises(ValidationError) as exc_info:
            await blog_service.create(author.id, "   ", "  ")

        assert set(exc_info.value.details["errors"]) == {"title", "content"}

    async def test_overlong_title_is_rejected(self, blog_service, author):
        with pytest.raises(ValidationError) as exc_info:
            await blog_service.create(author.id, "x" * 181, "body")

        assert "title" in exc_info.value.details["errors"]

    async def test_reserved_slug_is_never_allocated(self, blog_service, author):
        post = await blog_service.create(author.id, "Mine", "body")

        assert post.slug == "mine-2"

    async def test_title_at_column_limit_is_accepted(self, blog_service, author):
        post = await blog_service.create(author.id, "x" * TITLE_MAX_LENGTH, "body")

        assert len(post.title) == TITLE_MAX_LENGTH

    async def test_unknown_author_is_rejected(self, blog_service):
        with pytest.raises(UserNotFoundError):
            await blog_service.create(uuid.uuid4(), "Title", "body")

    async def test_slug_attempts_are_bounded(self, session, test_settings, author):
        service = BlogService(session, test_settings.model_copy(update={"SLUG_MAX_ATTEMPTS": 2}))
        await service.create(author.id, "Same", "one")
        await service.create(author.id, "Same", "two")

        with pytest.raises(ConflictError, match="Could not allocate a unique slug"):
            await service.create(author.id, "Same", "three")


class TestUpdate:
    async def test_owner_update_sets_updated_at(self, blog_service, author):
        post = await blog_service.create(author.id, "Ben Ahmet - Kaya", "v1")

        updated = await blog_service.update(author.id, post.id, "New title", "v2", is_published=False)

        assert updated.title == "New title"
        assert updated.content == "v2"
        assert updated.is_published is False
        assert updated.slug == "ben-ahmet-kaya"
        assert updated.updated_at is not None
        assert updated.updated_at > updated.created_at

    async def test_non_owner_is_forbidden_and_post_unchanged(self, blog_service, author, reader):
        post = await blog_service.create(author.id, "Mine", "original")

        with pytest.raises(AuthorizationError):
            await blog_service.update(reader.id, post.id, "Hijacked", "changed")

        unchanged = await blog_service.get_by_id(author.id, post.id)
        assert unchanged.title == "Mine"
        assert unchanged.content == "original"

    async def test_missing_post(self, blog_service, author):
        with pytest.raises(PostNotFoundError):
            await blog_service.update(author.id, 999, "Title", "body")

    async def test_regenerate_slug(self, blog_service, author):
        await blog_service.create(author.id, "Fresh Name", "taken")
        post = await blog_service.create(author.id, "Old Name", "body")

        updated = await blog_service.update(
            author.id, post.id, "Fresh Name", "body", regenerate_slug=True
        )

        assert updated.slug == "fresh-name-2"

    async def test_regenerate_slug_skips_every_taken_candidate(self, blog_service, author):
        await blog_service.create(author.id, "Fresh Name", "one")
        await blog_service.create(author.id, "Fresh Name", "two")
        post = await blog_service.create(author.id, "Old Name", "body")

        updated = await blog_service.update(
            author.id, post.id, "Fresh Name", "edited", regenerate_slug=True
        )

        assert updated.slug == "fresh-name-3"
        assert updated.content == "edited"
        assert (await blog_service.get_by_slug(author.id, "fresh-name-3")).id == post.id

    async def test_regenerate_slug_keeps_identical_slug(self, blog_service, author):
        post = await blog_service.create(author.id, "Same Title", "body")

        updated = await blog_service.update(
            author.id, post.id, "Same  Title!", "edited", regenerate_slug=True
        )

        assert updated.slug == "same-title"

    async def test_invalid_fields_are_rejected(self, blog_service, author):
        post = await blog_service.create(author.id, "Title", "body")

        with pytest.raises(ValidationError):
            await blog_service.update(author.id, post.id, "", "body")


class TestDelete:
    async def test_delete_twice(self, blog_service, author):
        post = await blog_service.create(author.id, "Short lived", "body")

        await blog_service.delete(author.id, post.id)

        with pytest.raises(PostNotFoundError):
            await blog_service.delete(author.id, post.id)

    async def test_non_owner_cannot_delete(self, blog_service, author, reader):
        post = await blog_service.create(author.id, "Keep me", "body")

        with pytest.raises(AuthorizationError):
            await blog_service.delete(reader.id, post.id)

        assert await blog_service.get_by_id(author.id, post.id)


class TestVisibility:
    async def test_drafts_are_hidden_from_other_users(self, blog_service, author, reader):
        published = await blog_service.create(author.id, "Public", "body")
        draft = await blog_service.create(author.id, "Draft", "body", is_published=False)

        reader_view = await blog_service.list_visible(reader.id)
        author_view = await blog_service.list_visible(author.id)

        assert [p.id for p in reader_view] == [published.id]
        assert {p.id for p in author_view} == {published.id, draft.id}

    async def test_direct_fetch_of_foreign_draft_is_not_found(self, blog_service, author, reader):
        draft = await blog_service.create(author.id, "Draft", "body", is_published=False)

        with pytest.raises(PostNotFoundError):
            await blog_service.get_by_slug(reader.id, draft.slug)
        with pytest.raises(PostNotFoundError):
            await blog_service.get_by_id(reader.id, draft.id)

        assert (await blog_service.get_by_slug(author.id, draft.slug)).id == draft.id

    async def test_missing_slug_message_names_the_slug(self, blog_service, author):
        with pytest.raises(PostNotFoundError, match="Post with slug 'ben-ahmet' not found"):
            await blog_service.get_by_slug(author.id, "ben-ahmet")

    async def test_list_mine_includes_drafts_only_for_me(self, blog_service, author, reader):
        await blog_service.create(author.id, "Public", "body")
        await blog_service.create(author.id, "Draft", "body", is_published=False)
        await blog_service.create(reader.id, "Reader post", "body")

        mine = await blog_service.list_mine(author.id)

        assert {p.title for p in mine} == {"Public", "Draft"}

    async def test_newest_first(self, blog_service, author):
        first = await blog_service.create(author.id, "First", "body")
        second = await blog_service.create(author.id, "Second", "body")

        posts = await blog_service.list_visible(author.id)

        assert [p.id for p in posts] == [second.id, first.id]
