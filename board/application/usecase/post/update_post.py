"""Update post use case."""

import logfire
from typing import Optional

from pydantic import BaseModel, Field

from board.domain.service import PostService
from board.domain.value import FileId, PostId

from .dto import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None are not changed. An empty file_ids list detaches
    every file.
    """

    post_id: int
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1, max_length=20000)
    file_ids: Optional[list[int]] = None


class UpdatePostResponse(PostItem):
    """Update post response."""


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
        """
        with logfire.span("update_post.execute", post_id=request.post_id):
            post = await self.post_service.update_post(
                PostId(request.post_id),
                title=request.title,
                content=request.content,
                file_ids=(
                    [FileId(file_id) for file_id in request.file_ids]
                    if request.file_ids is not None
                    else None
                ),
            )
            return UpdatePostResponse.from_post(post)
