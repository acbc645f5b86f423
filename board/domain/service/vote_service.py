"""Vote domain service.

Votes move between three stored states (liked, disliked, neutral) plus
the "no row yet" state. Each transition yields a pair of counter deltas
that are applied to the post in the same transaction as the vote write.
"""

from typing import NamedTuple, Optional

import logfire
from sqlalchemy.exc import IntegrityError

from board.domain.error import ConflictError
from board.domain.model.vote import Vote
from board.domain.repository import VoteRepository
from board.domain.value import PostId, UserId
from board.util.clock import Clock

from .base import Service
from .post_service import PostService
from .user_service import UserService


class VoteTransition(NamedTuple):
    """Outcome of applying a vote to a stored vote state."""

    like_delta: int
    dislike_delta: int
    is_like: Optional[bool]


# (stored value, requested value) -> transition
# A missing row behaves like a stored None.
_TRANSITIONS: dict[tuple[Optional[bool], bool], VoteTransition] = {
    (None, True): VoteTransition(like_delta=1, dislike_delta=0, is_like=True),
    (None, False): VoteTransition(like_delta=0, dislike_delta=1, is_like=False),
    (True, True): VoteTransition(like_delta=-1, dislike_delta=0, is_like=None),
    (True, False): VoteTransition(like_delta=-1, dislike_delta=1, is_like=False),
    (False, True): VoteTransition(like_delta=1, dislike_delta=-1, is_like=True),
    (False, False): VoteTransition(like_delta=0, dislike_delta=-1, is_like=None),
}


def resolve_transition(current: Optional[bool], is_like: bool) -> VoteTransition:
    """Look up the transition for a vote request.

    Args:
        current: Stored vote value (None for neutral or no vote)
        is_like: True to like, False to dislike

    Returns:
        Counter deltas and the value to store
    """
    return _TRANSITIONS[(current, is_like)]


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        user_service: UserService,
        clock: Clock,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            user_service: User domain service
            clock: Source of "now"
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.user_service = user_service
        self.clock = clock

    async def vote(self, post_id: PostId, user_id: UserId, is_like: bool) -> list[Vote]:
        """Like or dislike a post.

        Voting the same way twice toggles the vote off; voting the other
        way flips it. The post's counters move by the transition's deltas.

        Args:
            post_id: Post ID
            user_id: Voting user's ID
            is_like: True to like, False to dislike

        Returns:
            All votes on the post after the change, oldest first

        Raises:
            NotFoundError: If the post or user doesn't exist
            ConflictError: If a concurrent first vote by the same user won
        """
        with logfire.span(
            "vote_service.vote", post_id=post_id, user_id=user_id, is_like=is_like
        ):
            await self.post_service.ensure_post_exists(post_id)

            existing = await self.vote_repository.find_by_post_and_user(
                post_id, user_id, for_update=True
            )
            current = existing.is_like if existing is not None else None
            transition = resolve_transition(current, is_like)
            now = self.clock.now()

            if existing is None:
                await self.user_service.get_by_id(user_id)
                try:
                    await self.vote_repository.save(
                        Vote(
                            post_id=post_id,
                            user_id=user_id,
                            is_like=transition.is_like,
                            created_at=now,
                            updated_at=now,
                        )
                    )
                except IntegrityError:
                    logfire.warn(
                        "Concurrent first vote", post_id=post_id, user_id=user_id
                    )
                    raise ConflictError(
                        "Vote", f"user {user_id} is already voting on post {post_id}"
                    )
            else:
                await self.vote_repository.save(
                    existing.model_copy(
                        update={"is_like": transition.is_like, "updated_at": now}
                    )
                )

            await self.post_service.apply_vote_delta(
                post_id, transition.like_delta, transition.dislike_delta
            )

            logfire.info(
                "Vote applied",
                post_id=post_id,
                user_id=user_id,
                previous=current,
                current=transition.is_like,
            )
            return await self.vote_repository.find_by_post(post_id)
