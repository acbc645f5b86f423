"""In-memory vote repository for testing."""

from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from board.domain.model.vote import Vote
from board.domain.repository.vote import VoteRepository
from board.domain.value import PostId, UserId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}
        self._ids = count(1)

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId, for_update: bool = False
    ) -> Optional[Vote]:
        """Find a vote by post and user (nothing to lock in memory)."""
        for vote in self._votes.values():
            if vote.post_id == post_id and vote.user_id == user_id:
                return vote
        return None

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all votes on a post, oldest first."""
        votes = [v for v in self._votes.values() if v.post_id == post_id]
        votes.sort(key=lambda v: (v.created_at, v.id))
        return votes

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If inserting a second vote for the same post/user
        """
        if vote.id is None:
            if any(
                v.post_id == vote.post_id and v.user_id == vote.user_id
                for v in self._votes.values()
            ):
                raise IntegrityError("Duplicate vote", None, Exception())
            vote = vote.model_copy(update={"id": VoteId(next(self._ids))})

        self._votes[vote.id] = vote
        return vote
