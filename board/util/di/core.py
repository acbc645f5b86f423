"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import FeedSettings, RecommendationSettings, Settings
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        """Provide post listing and feed settings."""
        return settings.feed

    @provide(scope=Scope.APP)
    def provide_recommendation_settings(
        self, settings: Settings
    ) -> RecommendationSettings:
        """Provide recommendation refresher settings."""
        return settings.recommendation
