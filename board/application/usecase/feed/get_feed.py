"""Get feed use case."""

import logfire
from typing import Optional

from pydantic import BaseModel

from board.config import FeedSettings, RecommendationSettings
from board.domain.service import PostService, RecommendationService
from board.domain.value import FeedKind

from board.application.usecase.post.dto import PostItem


class GetFeedRequest(BaseModel):
    """Get feed request."""

    kind: FeedKind
    category: Optional[str] = None  # Only used by the emphasized feed


class GetFeedResponse(BaseModel):
    """Get feed response."""

    kind: FeedKind
    posts: list[PostItem]


class GetFeedUseCase:
    """Use case for the short curated lists shown beside the main listing."""

    def __init__(
        self,
        post_service: PostService,
        recommendation_service: RecommendationService,
        feed_settings: FeedSettings,
        recommendation_settings: RecommendationSettings,
    ) -> None:
        """Initialize get feed use case.

        Args:
            post_service: Post domain service
            recommendation_service: Recommendation domain service
            feed_settings: Feed sizes and windows
            recommendation_settings: Recommendation sizes
        """
        self.post_service = post_service
        self.recommendation_service = recommendation_service
        self.feed_settings = feed_settings
        self.recommendation_settings = recommendation_settings

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        """Execute get feed flow.

        Args:
            request: Which feed to build

        Returns:
            The feed's posts in display order
        """
        with logfire.span(
            "get_feed.execute", kind=request.kind.value, category=request.category
        ):
            if request.kind == FeedKind.RECENT:
                posts = await self.post_service.get_recent_posts(
                    limit=self.feed_settings.recent_limit
                )
            elif request.kind == FeedKind.POPULAR:
                posts = await self.post_service.get_popular_posts(
                    limit=self.feed_settings.popular_limit,
                    window_days=self.feed_settings.popular_window_days,
                )
            elif request.kind == FeedKind.RECOMMENDED:
                posts = await self.recommendation_service.get_recommended_posts(
                    limit=self.recommendation_settings.serve_limit
                )
            else:
                posts = await self.post_service.get_emphasized_posts(
                    category=request.category,
                    limit=self.feed_settings.emphasized_limit,
                )

            logfire.info("Feed built", kind=request.kind.value, count=len(posts))
            return GetFeedResponse(
                kind=request.kind, posts=[PostItem.from_post(post) for post in posts]
            )
