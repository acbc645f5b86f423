"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from board.config import Settings
from board.domain.repository import (
    FileRepository,
    HashtagRepository,
    PostRepository,
    RecommendedPostRepository,
    UserRepository,
    VoteRepository,
)
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    PostgresFileRepository,
    PostgresHashtagRepository,
    PostgresPostRepository,
    PostgresRecommendedPostRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from board.util.di.base import ProviderBase
from board.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        A vote and its counter update therefore land together or not at all.

        dishka sends the scope's exception (or None) back into the generator
        when the scope closes.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is not None:
                # Includes CancelledError from a timed-out refresher run
                logfire.warn("Session rollback", error=repr(exc))
                await session.rollback()
            else:
                await session.commit()
                logfire.info("Session committed")

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_file_repository(self, session: AsyncSession) -> FileRepository:
        """Provide File repository."""
        return PostgresFileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_hashtag_repository(self, session: AsyncSession) -> HashtagRepository:
        """Provide Hashtag repository."""
        return PostgresHashtagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_recommended_post_repository(
        self, session: AsyncSession
    ) -> RecommendedPostRepository:
        """Provide RecommendedPost repository."""
        return PostgresRecommendedPostRepository(session)
