"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.vote import Vote
from board.domain.value import PostId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId, for_update: bool = False
    ) -> Optional[Vote]:
        """Find a user's vote on a post.

        Args:
            post_id: The post's ID
            user_id: The user's ID
            for_update: Lock the row until the transaction ends

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post (neutral votes included).

        Args:
            post_id: The post's ID

        Returns:
            List of votes, oldest first
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (insert when it has no ID, update otherwise).

        Args:
            vote: The vote to save

        Returns:
            The saved vote, with its database-assigned ID

        Raises:
            IntegrityError: If inserting a second vote for the same post/user
        """
        pass
