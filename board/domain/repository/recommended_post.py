"""Recommended post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from board.domain.model.recommended_post import RecommendedPost
from board.domain.value import PostId


class RecommendedPostRepository(ABC):
    """Repository for the recommended-post ledger."""

    @abstractmethod
    async def upsert(self, post_id: PostId, updated_at: datetime) -> RecommendedPost:
        """Insert a ledger row for the post, or bump the existing one.

        Atomic: at most one row per post ID survives concurrent calls.
        updated_at never moves backwards.

        Args:
            post_id: Post ID
            updated_at: Refresh time

        Returns:
            The stored ledger row
        """
        pass

    @abstractmethod
    async def find_by_post_id(self, post_id: PostId) -> Optional[RecommendedPost]:
        """Find the ledger row for a post.

        Args:
            post_id: Post ID

        Returns:
            The row if present, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 6) -> list[RecommendedPost]:
        """Most recently refreshed ledger rows.

        Args:
            limit: Maximum number of rows

        Returns:
            Rows ordered by updated_at DESC
        """
        pass
