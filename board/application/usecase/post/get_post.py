"""Get post use case."""

from pydantic import BaseModel

from board.domain.service import PostService
from board.domain.value import PostId

from .dto import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostResponse(PostItem):
    """Get post response."""


class GetPostUseCase:
    """Use case for reading a single post.

    Reading counts as a view.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
        """
        post = await self.post_service.read_post(PostId(request.post_id))
        return GetPostResponse.from_post(post)
