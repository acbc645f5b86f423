"""Unit tests for the in-memory repositories used by the test container.

The in-memory implementations stand in for PostgreSQL in unit tests, so
they must keep the same constraints the schema enforces.
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from board.domain.model import File, Hashtag, Post, Vote
from board.domain.value import HashtagTitle, PostId, PostSortOrder, UserId
from board.persistence.repository.inmemory import (
    InMemoryFileRepository,
    InMemoryHashtagRepository,
    InMemoryPostRepository,
    InMemoryRecommendedPostRepository,
    InMemoryVoteRepository,
)

NOW = datetime(2024, 5, 1, 3, 0, tzinfo=timezone.utc)


class TestInMemoryRecommendedPostRepository:
    """Ledger upsert semantics."""

    @pytest.mark.asyncio
    async def test_upsert_keeps_one_row_per_post(self):
        """Repeated upserts update the same row."""
        repo = InMemoryRecommendedPostRepository()

        first = await repo.upsert(PostId(1), NOW)
        second = await repo.upsert(PostId(1), NOW + timedelta(hours=1))

        assert second.id == first.id
        assert second.updated_at == NOW + timedelta(hours=1)
        assert len(await repo.find_recent(limit=10)) == 1

    @pytest.mark.asyncio
    async def test_upsert_never_moves_updated_at_backwards(self):
        """A late, older upsert loses to the newer timestamp."""
        repo = InMemoryRecommendedPostRepository()

        await repo.upsert(PostId(1), NOW)
        row = await repo.upsert(PostId(1), NOW - timedelta(hours=1))

        assert row.updated_at == NOW

    @pytest.mark.asyncio
    async def test_find_recent_orders_by_updated_at(self):
        """Most recently bumped rows come first."""
        repo = InMemoryRecommendedPostRepository()
        await repo.upsert(PostId(1), NOW - timedelta(hours=2))
        await repo.upsert(PostId(2), NOW)
        await repo.upsert(PostId(3), NOW - timedelta(hours=1))

        rows = await repo.find_recent(limit=2)

        assert [r.post_id for r in rows] == [2, 3]


class TestInMemoryVoteRepository:
    """Vote uniqueness."""

    @pytest.mark.asyncio
    async def test_second_insert_for_same_pair_fails(self):
        """One vote row per (post, user)."""
        repo = InMemoryVoteRepository()
        await repo.save(Vote(post_id=PostId(1), user_id=UserId(1), is_like=True))

        with pytest.raises(IntegrityError):
            await repo.save(Vote(post_id=PostId(1), user_id=UserId(1), is_like=False))

    @pytest.mark.asyncio
    async def test_different_users_vote_independently(self):
        """Votes by different users never collide."""
        repo = InMemoryVoteRepository()

        await repo.save(Vote(post_id=PostId(1), user_id=UserId(1), is_like=True))
        await repo.save(Vote(post_id=PostId(1), user_id=UserId(2), is_like=True))

        assert len(await repo.find_by_post(PostId(1))) == 2


class TestInMemoryPostRepository:
    """Post counters and ordering."""

    @pytest.mark.asyncio
    async def test_save_does_not_overwrite_counters(self):
        """Counters only change through the dedicated methods."""
        repo = InMemoryPostRepository()
        post = await repo.save(
            Post(title="T", content="C", poster_id=UserId(1), created_at=NOW)
        )
        await repo.apply_vote_delta(post.id, 1, 0)
        await repo.increment_views(post.id)

        await repo.save(post.model_copy(update={"title": "Edited"}))

        stored = await repo.find_by_id(post.id)
        assert stored.title == "Edited"
        assert (stored.like_count, stored.views) == (1, 1)

    @pytest.mark.asyncio
    async def test_likes_order_breaks_ties_by_recency(self):
        """Equal like counts fall back to newest first."""
        repo = InMemoryPostRepository()
        older = await repo.save(
            Post(title="Older", content="C", poster_id=UserId(1), created_at=NOW)
        )
        newer = await repo.save(
            Post(
                title="Newer",
                content="C",
                poster_id=UserId(1),
                created_at=NOW + timedelta(minutes=1),
            )
        )

        posts = await repo.find_all(sort=PostSortOrder.LIKES)

        assert [p.id for p in posts] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_empty_id_filter_matches_nothing(self):
        """An empty candidate list is not the same as no filter."""
        repo = InMemoryPostRepository()
        await repo.save(Post(title="T", content="C", poster_id=UserId(1)))

        assert await repo.find_all(post_ids=[]) == []

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self):
        """A percent sign in the keyword matches only a percent sign."""
        repo = InMemoryPostRepository()
        sale = await repo.save(Post(title="100% cotton", content="C", poster_id=UserId(1)))
        await repo.save(Post(title="1000 threads", content="C", poster_id=UserId(1)))

        posts = await repo.search("100%")

        assert [p.id for p in posts] == [sale.id]


class TestInMemoryFileRepository:
    """File window queries."""

    @pytest.mark.asyncio
    async def test_post_ids_in_window_are_distinct(self):
        """Only attached files inside the window count, once per post."""
        repo = InMemoryFileRepository()
        await repo.save(File(post_id=PostId(1), url="a", created_at=NOW))
        await repo.save(File(post_id=PostId(1), url="b", created_at=NOW))
        await repo.save(
            File(post_id=PostId(2), url="c", created_at=NOW - timedelta(days=11))
        )
        await repo.save(File(post_id=None, url="d", created_at=NOW))

        post_ids = await repo.find_post_ids_created_between(
            NOW - timedelta(days=10), NOW
        )

        assert post_ids == [1]


class TestInMemoryHashtagRepository:
    """Hashtag uniqueness."""

    @pytest.mark.asyncio
    async def test_duplicate_title_fails(self):
        """Titles are unique."""
        repo = InMemoryHashtagRepository()
        await repo.save(Hashtag(title=HashtagTitle("news")))

        with pytest.raises(IntegrityError):
            await repo.save(Hashtag(title=HashtagTitle("news")))
