"""Integration tests for the PostgreSQL repositories.

These run against a real, migrated database and are skipped unless
RUN_INTEGRATION_TESTS is set. DATABASE__URL selects the database.
"""

import os
from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from board.domain.model import Vote
from board.domain.repository import (
    PostRepository,
    RecommendedPostRepository,
    VoteRepository,
)
from board.domain.service import VoteService
from board.util.clock import Clock
from tests.conftest import seed_post, seed_user
from tests.di import build_test_container
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("RUN_INTEGRATION_TESTS"),
    reason="needs a migrated PostgreSQL database",
)

# Integration test fixture - real persistence, frozen clock
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresRecommendedPostRepository:
    """Upsert against the unique post_id constraint."""

    @pytest.mark.asyncio
    async def test_upsert_bumps_existing_row(self, integration_env):
        """A second upsert updates the row instead of inserting."""
        # Arrange
        ledger = await integration_env.get(RecommendedPostRepository)
        clock = await integration_env.get(Clock)
        user = await seed_user(integration_env)
        post = await seed_post(integration_env, user.id)

        # Act
        first = await ledger.upsert(post.id, clock.now())
        second = await ledger.upsert(post.id, clock.now() + timedelta(hours=1))
        stale = await ledger.upsert(post.id, clock.now() - timedelta(hours=1))

        # Assert
        assert second.id == first.id
        assert second.updated_at == clock.now() + timedelta(hours=1)
        assert stale.updated_at == second.updated_at


class TestPostgresVoteRepository:
    """Vote uniqueness and counter arithmetic."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_violates_constraint(self, integration_env):
        """The (post_id, user_id) pair is unique."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        user = await seed_user(integration_env)
        post = await seed_post(integration_env, user.id)
        await vote_repo.save(Vote(post_id=post.id, user_id=user.id, is_like=True))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await vote_repo.save(Vote(post_id=post.id, user_id=user.id, is_like=False))

    @pytest.mark.asyncio
    async def test_vote_updates_counters_in_database(self, integration_env):
        """Counters are written with SQL arithmetic in the same session."""
        # Arrange
        vote_service = await integration_env.get(VoteService)
        post_repo = await integration_env.get(PostRepository)
        user = await seed_user(integration_env)
        post = await seed_post(integration_env, user.id)

        # Act
        await vote_service.vote(post.id, user.id, is_like=True)
        await vote_service.vote(post.id, user.id, is_like=False)

        # Assert
        stored = await post_repo.find_by_id(post.id)
        assert (stored.like_count, stored.dislike_count) == (0, 1)

    @pytest.mark.asyncio
    async def test_failed_request_leaves_no_vote_and_no_counter_change(self):
        """A scope that fails after the vote is written rolls both back."""
        # Arrange
        container = build_test_container(unmock={"persistence"})
        try:
            async with container() as env:
                user = await seed_user(env)
                post = await seed_post(env, user.id)

            # Act
            with pytest.raises(RuntimeError):
                async with container() as env:
                    vote_service = await env.get(VoteService)
                    await vote_service.vote(post.id, user.id, is_like=True)
                    raise RuntimeError("request failed after the vote")

            # Assert
            async with container() as env:
                vote_repo = await env.get(VoteRepository)
                post_repo = await env.get(PostRepository)
                assert await vote_repo.find_by_post_and_user(post.id, user.id) is None
                stored = await post_repo.find_by_id(post.id)
                assert (stored.like_count, stored.dislike_count) == (0, 0)
        finally:
            await container.close()


class TestPostgresPostRepository:
    """Keyword search."""

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, integration_env):
        """% and _ in the keyword are not LIKE wildcards."""
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        user = await seed_user(integration_env)
        marker = uuid4().hex
        sale = await seed_post(integration_env, user.id, title=f"{marker} 100% cotton")
        await seed_post(integration_env, user.id, title=f"{marker} 1000 threads")
        await seed_post(integration_env, user.id, title=f"{marker} 100x_y")

        # Act
        posts = await post_repo.search(f"{marker} 100%")
        underscored = await post_repo.search(f"{marker} 100_")

        # Assert
        assert [p.id for p in posts] == [sale.id]
        assert underscored == []
