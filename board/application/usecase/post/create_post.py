"""Create post use case."""

import logfire
from typing import Optional

from pydantic import BaseModel, Field

from board.domain.service import PostService
from board.domain.value import FileId, UserId

from .dto import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=20000)
    poster_id: int  # Acting user, supplied by the caller
    category: Optional[str] = Field(default=None, max_length=50)
    hashtags: list[str] = Field(default_factory=list)
    file_ids: list[int] = Field(default_factory=list)


class CreatePostResponse(PostItem):
    """Create post response."""


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Check the poster exists
        2. Insert the post with zeroed counters
        3. Create missing hashtags and link them
        4. Attach the uploaded files

        Args:
            request: Create post request

        Returns:
            Created post with hashtags and files

        Raises:
            NotFoundError: If the poster doesn't exist
            ValidationError: If a hashtag is invalid
        """
        with logfire.span(
            "create_post.execute",
            title=request.title,
            poster_id=request.poster_id,
            hashtags=request.hashtags,
        ):
            post = await self.post_service.create_post(
                title=request.title,
                content=request.content,
                poster_id=UserId(request.poster_id),
                category=request.category,
                hashtags=request.hashtags,
                file_ids=[FileId(file_id) for file_id in request.file_ids],
            )
            return CreatePostResponse.from_post(post)
