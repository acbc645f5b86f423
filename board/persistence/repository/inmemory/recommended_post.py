"""In-memory recommended post repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional

from board.domain.model.recommended_post import RecommendedPost
from board.domain.repository.recommended_post import RecommendedPostRepository
from board.domain.value import PostId, RecommendedPostId


class InMemoryRecommendedPostRepository(RecommendedPostRepository):
    """In-memory implementation of RecommendedPostRepository for testing.

    Rows are keyed by post ID, so a second upsert can never add a row.
    """

    def __init__(self) -> None:
        self._rows: dict[PostId, RecommendedPost] = {}
        self._ids = count(1)

    async def upsert(self, post_id: PostId, updated_at: datetime) -> RecommendedPost:
        """Insert or bump the ledger row; updated_at never moves backwards."""
        existing = self._rows.get(post_id)
        if existing is None:
            row = RecommendedPost(
                id=RecommendedPostId(next(self._ids)),
                post_id=post_id,
                updated_at=updated_at,
            )
        else:
            row = existing.model_copy(
                update={"updated_at": max(existing.updated_at, updated_at)}
            )
        self._rows[post_id] = row
        return row

    async def find_by_post_id(self, post_id: PostId) -> Optional[RecommendedPost]:
        """Find the ledger row for a post."""
        return self._rows.get(post_id)

    async def find_recent(self, limit: int = 6) -> list[RecommendedPost]:
        """Most recently refreshed rows."""
        rows = sorted(
            self._rows.values(), key=lambda r: (r.updated_at, r.id), reverse=True
        )
        return rows[:limit]
