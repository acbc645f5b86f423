"""Refresh recommendations use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from board.config import RecommendationSettings
from board.domain.service import RecommendationService


class RefreshRecommendationsResponse(BaseModel):
    """Refresh recommendations response."""

    post_ids: list[int]  # Upserted, in candidate order
    refreshed_at: Optional[datetime]  # None when nothing qualified


class RefreshRecommendationsUseCase:
    """Use case run by the scheduler to rebuild the recommendation ledger."""

    def __init__(
        self,
        recommendation_service: RecommendationService,
        settings: RecommendationSettings,
    ) -> None:
        """Initialize refresh use case.

        Args:
            recommendation_service: Recommendation domain service
            settings: Window and cap for the refresh
        """
        self.recommendation_service = recommendation_service
        self.settings = settings

    async def execute(self) -> RefreshRecommendationsResponse:
        """Execute one refresh run."""
        with logfire.span("refresh_recommendations.execute"):
            rows = await self.recommendation_service.refresh(
                file_window_days=self.settings.file_window_days,
                candidate_limit=self.settings.candidate_limit,
            )
            return RefreshRecommendationsResponse(
                post_ids=[row.post_id for row in rows],
                refreshed_at=max((row.updated_at for row in rows), default=None),
            )
