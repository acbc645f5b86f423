"""Unit tests for GetFeedUseCase."""

from datetime import timedelta

import pytest

from board.application.usecase.feed import GetFeedRequest, GetFeedUseCase
from board.domain.repository import RecommendedPostRepository
from board.domain.value import FeedKind
from board.util.clock import Clock
from tests.conftest import seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetFeedUseCase:
    """Tests for GetFeedUseCase."""

    @pytest.mark.asyncio
    async def test_recent_feed_is_capped(self, unit_env):
        """The recent feed returns at most five posts."""
        # Arrange
        use_case = await unit_env.get(GetFeedUseCase)
        clock = await unit_env.get(Clock)
        user = await seed_user(unit_env)
        for i in range(8):
            await seed_post(
                unit_env,
                user.id,
                title=f"Post {i}",
                created_at=clock.now() - timedelta(minutes=i),
            )

        # Act
        response = await use_case.execute(GetFeedRequest(kind=FeedKind.RECENT))

        # Assert
        assert response.kind == FeedKind.RECENT
        assert [p.title for p in response.posts] == [f"Post {i}" for i in range(5)]

    @pytest.mark.asyncio
    async def test_popular_feed_orders_by_views(self, unit_env):
        """The popular feed ranks posts by views."""
        # Arrange
        use_case = await unit_env.get(GetFeedUseCase)
        user = await seed_user(unit_env)
        await seed_post(unit_env, user.id, title="Few", views=1)
        await seed_post(unit_env, user.id, title="Many", views=10)

        # Act
        response = await use_case.execute(GetFeedRequest(kind=FeedKind.POPULAR))

        # Assert
        assert [p.title for p in response.posts] == ["Many", "Few"]

    @pytest.mark.asyncio
    async def test_emphasized_feed_uses_category(self, unit_env):
        """The emphasized feed honours the category filter."""
        # Arrange
        use_case = await unit_env.get(GetFeedUseCase)
        user = await seed_user(unit_env)
        await seed_post(unit_env, user.id, title="Notice", category="notice")
        await seed_post(unit_env, user.id, title="Chat", category="free", like_count=3)

        # Act
        response = await use_case.execute(
            GetFeedRequest(kind=FeedKind.EMPHASIZED, category="notice")
        )

        # Assert
        assert [p.title for p in response.posts] == ["Notice"]

    @pytest.mark.asyncio
    async def test_recommended_feed_reads_ledger(self, unit_env):
        """The recommended feed serves posts from the ledger only."""
        # Arrange
        use_case = await unit_env.get(GetFeedUseCase)
        ledger = await unit_env.get(RecommendedPostRepository)
        clock = await unit_env.get(Clock)
        user = await seed_user(unit_env)
        recommended = await seed_post(unit_env, user.id, title="Recommended")
        await seed_post(unit_env, user.id, title="Not recommended", like_count=50)
        await ledger.upsert(recommended.id, clock.now())

        # Act
        response = await use_case.execute(GetFeedRequest(kind=FeedKind.RECOMMENDED))

        # Assert
        assert [p.post_id for p in response.posts] == [recommended.id]
