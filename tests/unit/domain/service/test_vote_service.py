"""Unit tests for VoteService."""

import pytest

from board.domain.error import ConflictError, NotFoundError
from board.domain.model.vote import Vote
from board.domain.repository import PostRepository, VoteRepository
from board.domain.service import VoteService, VoteTransition, resolve_transition
from board.domain.value import PostId, UserId
from tests.conftest import seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestResolveTransition:
    """Tests for the vote transition table."""

    @pytest.mark.parametrize(
        ("current", "is_like", "expected"),
        [
            (None, True, VoteTransition(1, 0, True)),
            (None, False, VoteTransition(0, 1, False)),
            (True, True, VoteTransition(-1, 0, None)),
            (True, False, VoteTransition(-1, 1, False)),
            (False, True, VoteTransition(1, -1, True)),
            (False, False, VoteTransition(0, -1, None)),
        ],
    )
    def test_transition_table(self, current, is_like, expected):
        """Every (stored, requested) pair maps to exactly one transition."""
        assert resolve_transition(current, is_like) == expected

    @pytest.mark.parametrize("current", [True, False])
    def test_flip_moves_both_counters(self, current):
        """Flipping a vote changes each counter by exactly one."""
        transition = resolve_transition(current, not current)

        assert abs(transition.like_delta) == 1
        assert abs(transition.dislike_delta) == 1
        assert transition.like_delta + transition.dislike_delta == 0

    @pytest.mark.parametrize("is_like", [True, False])
    def test_same_vote_twice_is_identity(self, is_like):
        """Casting the same vote twice from neutral nets to zero."""
        first = resolve_transition(None, is_like)
        second = resolve_transition(first.is_like, is_like)

        assert second.is_like is None
        assert first.like_delta + second.like_delta == 0
        assert first.dislike_delta + second.dislike_delta == 0


class TestVote:
    """Tests for VoteService.vote."""

    @pytest.mark.asyncio
    async def test_first_like_creates_vote_and_increments_likes(self, unit_env):
        """First like should insert a vote and bump like_count."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)

        # Act
        votes = await vote_service.vote(post.id, user.id, is_like=True)

        # Assert
        saved = await vote_repo.find_by_post_and_user(post.id, user.id)
        assert saved is not None
        assert saved.is_like is True
        assert votes == [saved]

        updated = await post_repo.find_by_id(post.id)
        assert updated.like_count == 1
        assert updated.dislike_count == 0

    @pytest.mark.asyncio
    async def test_first_dislike_increments_dislikes(self, unit_env):
        """First dislike should bump dislike_count only."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)

        # Act
        await vote_service.vote(post.id, user.id, is_like=False)

        # Assert
        updated = await post_repo.find_by_id(post.id)
        assert updated.like_count == 0
        assert updated.dislike_count == 1

    @pytest.mark.asyncio
    async def test_toggle_off_keeps_row_with_null(self, unit_env):
        """Liking twice should neutralize the vote without deleting it."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)
        await vote_service.vote(post.id, user.id, is_like=True)
        first = await vote_repo.find_by_post_and_user(post.id, user.id)

        # Act
        await vote_service.vote(post.id, user.id, is_like=True)

        # Assert
        saved = await vote_repo.find_by_post_and_user(post.id, user.id)
        assert saved.id == first.id
        assert saved.is_like is None
        assert (await post_repo.find_by_id(post.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_flip_from_like_to_dislike(self, unit_env):
        """Switching sides should move one count from likes to dislikes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)
        await vote_service.vote(post.id, user.id, is_like=True)

        # Act
        votes = await vote_service.vote(post.id, user.id, is_like=False)

        # Assert
        assert [v.is_like for v in votes] == [False]
        updated = await post_repo.find_by_id(post.id)
        assert updated.like_count == 0
        assert updated.dislike_count == 1

    @pytest.mark.asyncio
    async def test_vote_from_neutral_row_uses_update_path(self, unit_env):
        """A stored neutral vote behaves like no vote, without a second row."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)
        await vote_repo.save(Vote(post_id=post.id, user_id=user.id, is_like=None))

        # Act
        votes = await vote_service.vote(post.id, user.id, is_like=False)

        # Assert
        assert len(votes) == 1
        assert votes[0].is_like is False
        assert (await post_repo.find_by_id(post.id)).dislike_count == 1

    @pytest.mark.asyncio
    async def test_like_toggle_then_dislike_sequence(self, unit_env):
        """like, like, dislike ends disliked with zero likes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)

        # Act & Assert
        await vote_service.vote(post.id, user.id, is_like=True)
        assert (await vote_repo.find_by_post_and_user(post.id, user.id)).is_like is True
        assert (await post_repo.find_by_id(post.id)).like_count == 1

        await vote_service.vote(post.id, user.id, is_like=True)
        assert (await vote_repo.find_by_post_and_user(post.id, user.id)).is_like is None
        assert (await post_repo.find_by_id(post.id)).like_count == 0

        await vote_service.vote(post.id, user.id, is_like=False)
        final = await post_repo.find_by_id(post.id)
        assert (await vote_repo.find_by_post_and_user(post.id, user.id)).is_like is False
        assert final.like_count == 0
        assert final.dislike_count == 1

    @pytest.mark.asyncio
    async def test_counters_match_votes_across_users(self, unit_env):
        """Counters should always equal the number of likes and dislikes stored."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        vote_repo = await unit_env.get(VoteRepository)
        author = await seed_user(unit_env, "author")
        post = await seed_post(unit_env, author.id)
        users = [await seed_user(unit_env, f"user{i}") for i in range(4)]
        requests = [
            (users[0], True),
            (users[1], True),
            (users[2], False),
            (users[0], False),
            (users[3], True),
            (users[1], True),
            (users[2], True),
        ]

        # Act
        for user, is_like in requests:
            await vote_service.vote(post.id, user.id, is_like=is_like)

        # Assert
        votes = await vote_repo.find_by_post(post.id)
        updated = await post_repo.find_by_id(post.id)
        assert len(votes) == 4
        assert updated.like_count == sum(1 for v in votes if v.is_like is True)
        assert updated.dislike_count == sum(1 for v in votes if v.is_like is False)
        assert (updated.like_count, updated.dislike_count) == (2, 1)

    @pytest.mark.asyncio
    async def test_vote_on_missing_post_raises_not_found(self, unit_env):
        """Voting on a post that doesn't exist should raise NotFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user = await seed_user(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await vote_service.vote(PostId(999), user.id, is_like=True)

    @pytest.mark.asyncio
    async def test_vote_on_deleted_post_raises_not_found(self, unit_env):
        """Soft-deleted posts can't be voted on."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)
        await post_repo.save(post.model_copy(update={"deleted_at": post.created_at}))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.vote(post.id, user.id, is_like=True)

    @pytest.mark.asyncio
    async def test_vote_by_unknown_user_raises_not_found(self, unit_env):
        """A first vote by an unknown user should not touch the counters."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        author = await seed_user(unit_env)
        post = await seed_post(unit_env, author.id)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await vote_service.vote(post.id, UserId(999), is_like=True)
        assert (await post_repo.find_by_id(post.id)).like_count == 0

    @pytest.mark.asyncio
    async def test_duplicate_insert_becomes_conflict(self, unit_env, monkeypatch):
        """Losing the race on the unique (post, user) pair raises ConflictError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        post_repo = await unit_env.get(PostRepository)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)
        # Another request inserted its vote after our lookup
        await vote_repo.save(Vote(post_id=post.id, user_id=user.id, is_like=True))

        async def stale_lookup(*args, **kwargs):
            return None

        monkeypatch.setattr(vote_repo, "find_by_post_and_user", stale_lookup)

        # Act & Assert
        with pytest.raises(ConflictError):
            await vote_service.vote(post.id, user.id, is_like=True)
        assert (await post_repo.find_by_id(post.id)).like_count == 0
