"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import FeedSettings
from board.domain.repository import (
    FileRepository,
    HashtagRepository,
    PostRepository,
    RecommendedPostRepository,
    UserRepository,
    VoteRepository,
)
from board.domain.service import (
    HashtagService,
    PostService,
    RecommendationService,
    UserService,
    VoteService,
)
from board.util.clock import Clock
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_hashtag_service(
        self, hashtag_repository: HashtagRepository
    ) -> HashtagService:
        """Provide hashtag domain service."""
        return HashtagService(hashtag_repository=hashtag_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        file_repository: FileRepository,
        hashtag_service: HashtagService,
        user_service: UserService,
        clock: Clock,
        feed_settings: FeedSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            file_repository=file_repository,
            hashtag_service=hashtag_service,
            user_service=user_service,
            clock=clock,
            max_page_size=feed_settings.max_page_size,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        user_service: UserService,
        clock: Clock,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            user_service=user_service,
            clock=clock,
        )

    @provide
    def get_recommendation_service(
        self,
        recommended_post_repository: RecommendedPostRepository,
        file_repository: FileRepository,
        post_service: PostService,
        clock: Clock,
    ) -> RecommendationService:
        """Provide recommendation domain service."""
        return RecommendationService(
            recommended_post_repository=recommended_post_repository,
            file_repository=file_repository,
            post_service=post_service,
            clock=clock,
        )
