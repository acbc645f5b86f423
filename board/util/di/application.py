"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.feed import GetFeedUseCase
from board.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    SearchPostsUseCase,
    UpdatePostUseCase,
)
from board.application.usecase.recommendation import RefreshRecommendationsUseCase
from board.application.usecase.vote import VotePostUseCase
from board.config import FeedSettings, RecommendationSettings
from board.domain.service import PostService, RecommendationService, VoteService
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self, post_service: PostService
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_get_feed_use_case(
        self,
        post_service: PostService,
        recommendation_service: RecommendationService,
        feed_settings: FeedSettings,
        recommendation_settings: RecommendationSettings,
    ) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(
            post_service=post_service,
            recommendation_service=recommendation_service,
            feed_settings=feed_settings,
            recommendation_settings=recommendation_settings,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_post_use_case(
        self, vote_service: VoteService, post_service: PostService
    ) -> VotePostUseCase:
        """Provide vote on post use case."""
        return VotePostUseCase(vote_service=vote_service, post_service=post_service)

    # Recommendation use cases
    @provide(scope=Scope.REQUEST)
    def get_refresh_recommendations_use_case(
        self,
        recommendation_service: RecommendationService,
        settings: RecommendationSettings,
    ) -> RefreshRecommendationsUseCase:
        """Provide refresh recommendations use case."""
        return RefreshRecommendationsUseCase(
            recommendation_service=recommendation_service, settings=settings
        )
