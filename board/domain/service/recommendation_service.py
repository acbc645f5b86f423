"""Recommendation domain service."""

from datetime import timedelta

import logfire

from board.domain.model.post import Post
from board.domain.model.recommended_post import RecommendedPost
from board.domain.repository import FileRepository, RecommendedPostRepository
from board.domain.value import PostSortOrder
from board.util.clock import Clock

from .base import Service
from .post_service import PostService


class RecommendationService(Service):
    """Maintains the recommended-post ledger and serves recommendations.

    A post becomes a candidate when a file attached to it was created
    within the trailing window. The ledger keeps one row per post; the
    read path takes the most recently refreshed rows and orders their
    posts by likes.
    """

    def __init__(
        self,
        recommended_post_repository: RecommendedPostRepository,
        file_repository: FileRepository,
        post_service: PostService,
        clock: Clock,
    ) -> None:
        """Initialize recommendation service.

        Args:
            recommended_post_repository: Ledger repository
            file_repository: File repository
            post_service: Post domain service
            clock: Source of "now"
        """
        self.recommended_post_repository = recommended_post_repository
        self.file_repository = file_repository
        self.post_service = post_service
        self.clock = clock

    async def refresh(
        self, file_window_days: int = 10, candidate_limit: int = 6
    ) -> list[RecommendedPost]:
        """Upsert ledger rows for the current top candidates.

        Only the top candidate_limit posts (by likes, then newest) are
        written. Rows for posts that no longer qualify are left alone.

        Args:
            file_window_days: Trailing window for file creation time
            candidate_limit: Maximum number of posts to upsert

        Returns:
            The upserted ledger rows, in candidate order
        """
        now = self.clock.now()
        window_start = now - timedelta(days=file_window_days)

        with logfire.span(
            "recommendation_service.refresh",
            file_window_days=file_window_days,
            candidate_limit=candidate_limit,
        ):
            post_ids = await self.file_repository.find_post_ids_created_between(
                window_start, now
            )
            candidates = await self.post_service.get_posts_by_ids(
                post_ids, sort=PostSortOrder.LIKES, limit=candidate_limit
            )

            rows = []
            for post in candidates:
                rows.append(
                    await self.recommended_post_repository.upsert(post.id, now)
                )

            logfire.info(
                "Recommendations refreshed",
                qualifying=len(post_ids),
                upserted=len(rows),
            )
            return rows

    async def get_recommended_posts(self, limit: int = 6) -> list[Post]:
        """Posts from the most recently refreshed ledger rows, most liked first.

        Args:
            limit: Number of ledger rows to read and maximum posts returned

        Returns:
            Up to limit live posts
        """
        with logfire.span("recommendation_service.get_recommended_posts", limit=limit):
            rows = await self.recommended_post_repository.find_recent(limit=limit)
            return await self.post_service.get_posts_by_ids(
                [row.post_id for row in rows], sort=PostSortOrder.LIKES, limit=limit
            )
