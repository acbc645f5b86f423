"""Recommendation use cases."""

from .refresh_recommendations import (
    RefreshRecommendationsResponse,
    RefreshRecommendationsUseCase,
)

__all__ = [
    "RefreshRecommendationsResponse",
    "RefreshRecommendationsUseCase",
]
