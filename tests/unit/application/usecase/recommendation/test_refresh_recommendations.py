"""Unit tests for RefreshRecommendationsUseCase."""

from datetime import timedelta

import pytest

from board.application.usecase.recommendation import RefreshRecommendationsUseCase
from board.util.clock import Clock
from tests.conftest import seed_file, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRefreshRecommendationsUseCase:
    """Tests for RefreshRecommendationsUseCase."""

    @pytest.mark.asyncio
    async def test_refresh_reports_upserted_posts(self, unit_env):
        """The response lists upserted posts and the run time."""
        # Arrange
        use_case = await unit_env.get(RefreshRecommendationsUseCase)
        clock = await unit_env.get(Clock)
        user = await seed_user(unit_env)
        liked = await seed_post(unit_env, user.id, title="Liked", like_count=5)
        plain = await seed_post(unit_env, user.id, title="Plain")
        await seed_file(unit_env, liked.id, created_at=clock.now() - timedelta(days=2))
        await seed_file(unit_env, plain.id, created_at=clock.now() - timedelta(days=9))

        # Act
        response = await use_case.execute()

        # Assert
        assert response.post_ids == [liked.id, plain.id]
        assert response.refreshed_at == clock.now()

    @pytest.mark.asyncio
    async def test_refresh_with_nothing_to_do(self, unit_env):
        """An empty run reports no posts and no timestamp."""
        # Arrange
        use_case = await unit_env.get(RefreshRecommendationsUseCase)

        # Act
        response = await use_case.execute()

        # Assert
        assert response.post_ids == []
        assert response.refreshed_at is None
