"""
Blog Handler

Blog post endpoints. Every route requires a bearer token.

Routes:
=======
    GET    /api/blog                 → posts visible to the caller
    GET    /api/blog/mine            → caller's posts, drafts included
    GET    /api/blog/id/{post_id}    → single post by id
    GET    /api/blog/{slug}          → single post by slug
    POST   /api/blog                 → create (201)
    PUT    /api/blog/{post_id}       → replace title/content/isPublished
    DELETE /api/blog/{post_id}       → delete (204)

"/mine" and "/id/{post_id}" are declared before "/{slug}" so they win the
route match. BlogService never hands out the slug "mine", so no post is
shadowed by the list route.
"""

from fastapi import APIRouter, Response, status

from src.api.dependencies.auth import CurrentUser
from src.api.dependencies.services import BlogServiceDep
from src.shared.schemas.blog import BlogCreateRequest, BlogResponse, BlogUpdateRequest
from src.shared.schemas.common import ErrorResponse


router = APIRouter()


@router.get("", response_model=list[BlogResponse])
async def list_posts(
    current_user: CurrentUser,
    blog_service: BlogServiceDep,
):
    """List published posts plus the caller's drafts, newest first."""
    posts = await blog_service.list_visible(current_user.user_id)
    return [BlogResponse.from_post(post) for post in posts]


@router.get("/mine", response_model=list[BlogResponse])
async def list_my_posts(
    current_user: CurrentUser,
    blog_service: BlogServiceDep,
):
    """List every post written by the caller."""
    posts = await blog_service.list_mine(current_user.user_id)
    return [BlogResponse.from_post(post) for post in posts]


@router.get(
    "/id/{post_id}",
    response_model=BlogResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_post_by_id(
    post_id: int,
    current_user: CurrentUser,
    blog_service: BlogServiceDep,
):
    """Get a post by numeric id. Other authors' drafts return 404."""
    post = await blog_service.get_by_id(current_user.user_id, post_id)
    return BlogResponse.from_post(post)


@router.get(
    "/{slug}",
    response_model=BlogResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_post_by_slug(
    slug: str,
    current_user: CurrentUser,
    blog_service: BlogServiceDep,
):
    """Get a post by slug. Other authors' drafts return 404."""
    post = await blog_service.get_by_slug(current_user.user_id, slug)
    return BlogResponse.from_post(post)


@router.post(
    "",
    response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def create_post(
    data: BlogCreateRequest,
    current_user: CurrentUser,
    blog_service: BlogServiceDep,
):
    """
    Create a post owned by the caller.

    The slug is derived from the title; collisions get a numeric suffix.

    Raises:
        400: Title or content invalid
        409: No free slug could be allocated
    """
    post = await blog_service.create(
        author_id=current_user.user_id,
        title=data.title,
        content=data.content,
        is_published=data.is_published,
    )
    return BlogResponse.from_post(post)


@router.put(
    "/{post_id}",
    response_model=BlogResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def update_post(
    post_id: int,
    data: BlogUpdateRequest,
    current_user: CurrentUser,
    blog_service: BlogServiceDep,
):
    """
    Update a post owned by the caller.

    Raises:
        400: Title or content invalid
        403: Caller is not the author
        404: Post does not exist
        409: regenerateSlug set and no free slug could be allocated
    """
    post = await blog_service.update(
        requester_id=current_user.user_id,
        post_id=post_id,
        title=data.title,
        content=data.content,
        is_published=data.is_published,
        regenerate_slug=data.regenerate_slug,
    )
    return BlogResponse.from_post(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def delete_post(
    post_id: int,
    current_user: CurrentUser,
    blog_service: BlogServiceDep,
):
    """
    Delete a post owned by the caller.

    Raises:
        403: Caller is not the author
        404: Post does not exist
    """
    await blog_service.delete(current_user.user_id, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
