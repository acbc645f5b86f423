"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from board.application.usecase.vote import (
    VotePostRequest,
    VotePostResponse,
    VotePostUseCase,
)
from board.domain.error import ConflictError, NotFoundError

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for liking or disliking a post."""

    user_id: int
    is_like: bool


@router.post("/posts/{post_id}/votes", response_model=VotePostResponse)
async def vote_post(
    post_id: int,
    request: VoteAPIRequest,
    vote_post_use_case: FromDishka[VotePostUseCase],
) -> VotePostResponse:
    """Like or dislike a post.

    Voting the same way twice withdraws the vote; voting the other way
    switches it.

    Args:
        post_id: Post ID
        request: Voting user and direction
        vote_post_use_case: Vote use case from DI

    Returns:
        The post's counters and all of its votes

    Raises:
        HTTPException: If post or user not found, or the vote collided
    """
    try:
        return await vote_post_use_case.execute(
            VotePostRequest(
                post_id=post_id, user_id=request.user_id, is_like=request.is_like
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        logfire.warn("Vote conflict", post_id=post_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error voting", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to record vote",
        )
