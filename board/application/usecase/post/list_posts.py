"""List posts use case."""

import logfire
from typing import Optional

from pydantic import BaseModel, Field

from board.domain.service import PostService
from board.domain.value import HashtagId

from .dto import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    take: int = Field(default=20, ge=1)
    category: Optional[str] = None
    hashtag_id: Optional[int] = None  # Takes precedence over hashtag_title
    hashtag_title: Optional[str] = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int
    page: int
    take: int


class ListPostsUseCase:
    """Use case for listing posts with filtering and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and pagination

        Returns:
            Newest posts matching the filters and the total match count

        Raises:
            ValidationError: If take exceeds the configured maximum
        """
        with logfire.span(
            "list_posts.execute",
            page=request.page,
            take=request.take,
            category=request.category,
        ):
            page = await self.post_service.list_posts(
                page=request.page,
                take=request.take,
                category=request.category,
                hashtag_id=(
                    HashtagId(request.hashtag_id)
                    if request.hashtag_id is not None
                    else None
                ),
                hashtag_title=request.hashtag_title,
            )

            return ListPostsResponse(
                posts=[PostItem.from_post(post) for post in page.posts],
                total=page.total,
                page=page.page,
                take=page.take,
            )
