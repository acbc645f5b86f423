"""Search posts use case."""

from pydantic import BaseModel, Field

from board.domain.service import PostService

from .dto import PostItem


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    keyword: str
    page: int = Field(default=1, ge=1)
    take: int = Field(default=20, ge=1)


class SearchPostsResponse(BaseModel):
    """Search posts response."""

    keyword: str
    posts: list[PostItem]


class SearchPostsUseCase:
    """Use case for keyword search over titles and contents."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: SearchPostsRequest) -> SearchPostsResponse:
        """Execute search flow.

        Raises:
            ValidationError: If the keyword is blank
        """
        posts = await self.post_service.search_posts(
            request.keyword, page=request.page, take=request.take
        )
        return SearchPostsResponse(
            keyword=request.keyword.strip(),
            posts=[PostItem.from_post(post) for post in posts],
        )
