"""Vote on post use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from board.domain.model import Vote
from board.domain.service import PostService, VoteService
from board.domain.value import PostId, UserId


class VotePostRequest(BaseModel):
    """Vote on post request."""

    post_id: int
    user_id: int  # Acting user, supplied by the caller
    is_like: bool  # True = like, False = dislike


class VoteItem(BaseModel):
    """Vote in a response."""

    vote_id: int
    user_id: int
    is_like: Optional[bool]
    updated_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteItem":
        return cls(
            vote_id=vote.id,
            user_id=vote.user_id,
            is_like=vote.is_like,
            updated_at=vote.updated_at,
        )


class VotePostResponse(BaseModel):
    """Vote on post response."""

    post_id: int
    like_count: int
    dislike_count: int
    votes: list[VoteItem]


class VotePostUseCase:
    """Use case for liking or disliking a post."""

    def __init__(self, vote_service: VoteService, post_service: PostService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
            post_service: Post domain service
        """
        self.vote_service = vote_service
        self.post_service = post_service

    async def execute(self, request: VotePostRequest) -> VotePostResponse:
        """Execute vote flow.

        Args:
            request: Vote request

        Returns:
            The post's counters and all of its votes after the change

        Raises:
            NotFoundError: If the post or user doesn't exist
            ConflictError: If a concurrent first vote by the same user won
        """
        with logfire.span(
            "vote_post.execute",
            post_id=request.post_id,
            user_id=request.user_id,
            is_like=request.is_like,
        ):
            post_id = PostId(request.post_id)
            votes = await self.vote_service.vote(
                post_id, UserId(request.user_id), request.is_like
            )
            post = await self.post_service.ensure_post_exists(post_id)

            return VotePostResponse(
                post_id=post.id,
                like_count=post.like_count,
                dislike_count=post.dislike_count,
                votes=[VoteItem.from_vote(vote) for vote in votes],
            )
