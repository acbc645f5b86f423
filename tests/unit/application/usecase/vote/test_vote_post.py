"""Unit tests for VotePostUseCase."""

import pytest

from board.application.usecase.vote import VotePostRequest, VotePostUseCase
from board.domain.error import NotFoundError
from tests.conftest import seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestVotePostUseCase:
    """Tests for VotePostUseCase."""

    @pytest.mark.asyncio
    async def test_vote_returns_counters_and_votes(self, unit_env):
        """The response reflects the post after the vote."""
        # Arrange
        use_case = await unit_env.get(VotePostUseCase)
        author = await seed_user(unit_env, "author")
        voter = await seed_user(unit_env, "voter")
        post = await seed_post(unit_env, author.id)

        # Act
        response = await use_case.execute(
            VotePostRequest(post_id=post.id, user_id=voter.id, is_like=False)
        )

        # Assert
        assert response.post_id == post.id
        assert (response.like_count, response.dislike_count) == (0, 1)
        assert len(response.votes) == 1
        assert response.votes[0].user_id == voter.id
        assert response.votes[0].is_like is False

    @pytest.mark.asyncio
    async def test_toggle_reports_neutral_vote(self, unit_env):
        """Withdrawing a vote leaves a neutral entry in the response."""
        # Arrange
        use_case = await unit_env.get(VotePostUseCase)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)
        request = VotePostRequest(post_id=post.id, user_id=user.id, is_like=True)
        await use_case.execute(request)

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.like_count == 0
        assert [v.is_like for v in response.votes] == [None]

    @pytest.mark.asyncio
    async def test_vote_on_missing_post(self, unit_env):
        """Missing posts raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(VotePostUseCase)
        user = await seed_user(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                VotePostRequest(post_id=77, user_id=user.id, is_like=True)
            )
