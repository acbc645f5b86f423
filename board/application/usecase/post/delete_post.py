"""Delete post use case."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.service import PostService
from board.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: int
    deleted_at: datetime


class DeletePostUseCase:
    """Use case for soft-deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist or was already deleted
        """
        post = await self.post_service.delete_post(PostId(request.post_id))
        return DeletePostResponse(post_id=post.id, deleted_at=post.deleted_at)
