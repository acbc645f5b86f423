"""Post routes."""

import logfire
from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from board.application.usecase.feed import (
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
)
from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    SearchPostsRequest,
    SearchPostsResponse,
    SearchPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from board.domain.error import NotFoundError, ValidationError
from board.domain.value import FeedKind

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=20000)
    poster_id: int
    category: Optional[str] = Field(default=None, max_length=50)
    hashtags: list[str] = Field(default_factory=list, max_length=20)
    file_ids: list[int] = Field(default_factory=list)


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI

    Returns:
        Created post details

    Raises:
        HTTPException: If the poster doesn't exist or a hashtag is invalid
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(**request.model_dump())
        )
    except NotFoundError as e:
        logfire.warn("Post creation for unknown poster", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1, ge=1),
    take: int = Query(default=20, ge=1),
    category: Optional[str] = None,
    hashtag_id: Optional[int] = None,
    hashtag_title: Optional[str] = None,
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-based page number
        take: Page size
        category: Category filter
        hashtag_id: Hashtag filter by ID
        hashtag_title: Hashtag filter by title (ignored if hashtag_id is given)

    Returns:
        One page of posts and the total count
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(
                page=page,
                take=take,
                category=category,
                hashtag_id=hashtag_id,
                hashtag_title=hashtag_title,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/search", response_model=SearchPostsResponse)
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    keyword: str = Query(default=""),
    page: int = Query(default=1, ge=1),
    take: int = Query(default=20, ge=1),
) -> SearchPostsResponse:
    """Search titles and contents for a keyword."""
    try:
        return await search_posts_use_case.execute(
            SearchPostsRequest(keyword=keyword, page=page, take=take)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


async def _get_feed(
    get_feed_use_case: GetFeedUseCase, kind: FeedKind, category: Optional[str] = None
) -> GetFeedResponse:
    try:
        return await get_feed_use_case.execute(
            GetFeedRequest(kind=kind, category=category)
        )
    except Exception as e:
        logfire.error("Unexpected error building feed", kind=kind.value, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load posts",
        )


@router.get("/recent", response_model=GetFeedResponse)
async def get_recent_posts(
    get_feed_use_case: FromDishka[GetFeedUseCase],
) -> GetFeedResponse:
    """Newest posts."""
    return await _get_feed(get_feed_use_case, FeedKind.RECENT)


@router.get("/popular", response_model=GetFeedResponse)
async def get_popular_posts(
    get_feed_use_case: FromDishka[GetFeedUseCase],
) -> GetFeedResponse:
    """Most viewed posts of the past week."""
    return await _get_feed(get_feed_use_case, FeedKind.POPULAR)


@router.get("/recommended", response_model=GetFeedResponse)
async def get_recommended_posts(
    get_feed_use_case: FromDishka[GetFeedUseCase],
) -> GetFeedResponse:
    """Recommended posts, most liked first."""
    return await _get_feed(get_feed_use_case, FeedKind.RECOMMENDED)


@router.get("/emphasized", response_model=GetFeedResponse)
async def get_emphasized_posts(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    category: Optional[str] = None,
) -> GetFeedResponse:
    """Most liked posts, optionally within a category."""
    return await _get_feed(get_feed_use_case, FeedKind.EMPHASIZED, category)


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Read a post. Each read counts as a view.

    Args:
        post_id: Post ID
        get_post_use_case: Get post use case from DI

    Returns:
        Post details

    Raises:
        HTTPException: If post not found or deleted
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1, max_length=20000)
    file_ids: Optional[list[int]] = None


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Update a post's title, content or attached files.

    Args:
        post_id: Post ID
        request: Fields to change
        update_post_use_case: Update post use case from DI

    Returns:
        Updated post

    Raises:
        HTTPException: If post not found or deleted
    """
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(post_id=post_id, **request.model_dump())
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Soft-delete a post."""
    try:
        return await delete_post_use_case.execute(DeletePostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
