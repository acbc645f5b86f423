"""Unit tests for RecommendationScheduler."""

import asyncio

import pytest
import pytest_asyncio

from board.application.scheduler import RecommendationScheduler
from board.config import RecommendationSettings
from board.domain.repository import RecommendedPostRepository
from board.util.clock import Clock
from tests.conftest import seed_file, seed_post, seed_user
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """App-scope test container shared by the scheduler and the test."""
    container = build_test_container()
    yield container
    await container.close()


async def seed_candidate(container) -> int:
    """Create one post with a fresh file and return its ID."""
    async with container() as env:
        clock = await env.get(Clock)
        user = await seed_user(env)
        post = await seed_post(env, user.id)
        await seed_file(env, post.id, created_at=clock.now())
        return post.id


class TestRunOnce:
    """Tests for run_once."""

    @pytest.mark.asyncio
    async def test_run_once_refreshes_ledger(self, container):
        """A run resolves the use case in its own scope and writes the ledger."""
        # Arrange
        post_id = await seed_candidate(container)
        scheduler = RecommendationScheduler(container, RecommendationSettings())

        # Act
        result = await scheduler.run_once()

        # Assert
        assert result is not None
        assert result.post_ids == [post_id]
        async with container() as env:
            ledger = await env.get(RecommendedPostRepository)
            assert await ledger.find_by_post_id(post_id) is not None

    @pytest.mark.asyncio
    async def test_overlapping_run_is_skipped(self, container):
        """A run requested while another holds the lock does nothing."""
        # Arrange
        scheduler = RecommendationScheduler(container, RecommendationSettings())

        # Act
        async with scheduler._lock:
            result = await scheduler.run_once()

        # Assert
        assert result is None

    @pytest.mark.asyncio
    async def test_slow_run_times_out(self, container, monkeypatch):
        """Runs longer than run_timeout_seconds are cancelled."""
        # Arrange
        scheduler = RecommendationScheduler(
            container, RecommendationSettings(run_timeout_seconds=0.01)
        )

        async def slow_refresh():
            await asyncio.sleep(1)

        monkeypatch.setattr(scheduler, "_refresh", slow_refresh)

        # Act & Assert
        with pytest.raises(asyncio.TimeoutError):
            await scheduler.run_once()
        assert not scheduler._lock.locked()


class TestLifecycle:
    """Tests for start / stop and the background loop."""

    @pytest.mark.asyncio
    async def test_start_is_idempotent_and_stop_cancels(self, container):
        """Starting twice keeps one task; stopping ends it."""
        # Arrange
        scheduler = RecommendationScheduler(container, RecommendationSettings())

        # Act
        scheduler.start()
        task = scheduler._task
        scheduler.start()

        # Assert
        assert scheduler.running
        assert scheduler._task is task

        await scheduler.stop()
        assert not scheduler.running
        assert task.cancelled()

    @pytest.mark.asyncio
    async def test_stop_without_start_is_noop(self, container):
        """Stopping a scheduler that never started is harmless."""
        scheduler = RecommendationScheduler(container, RecommendationSettings())

        await scheduler.stop()

        assert not scheduler.running

    @pytest.mark.asyncio
    async def test_loop_runs_on_interval(self, container):
        """The background task refreshes without being asked."""
        # Arrange
        post_id = await seed_candidate(container)
        scheduler = RecommendationScheduler(
            container, RecommendationSettings(interval_seconds=0.01)
        )

        # Act
        scheduler.start()
        await asyncio.sleep(0.1)
        await scheduler.stop()

        # Assert
        async with container() as env:
            ledger = await env.get(RecommendedPostRepository)
            assert await ledger.find_by_post_id(post_id) is not None

    @pytest.mark.asyncio
    async def test_failed_run_keeps_loop_alive(self, container, monkeypatch):
        """An exception in one run doesn't stop later runs."""
        # Arrange
        scheduler = RecommendationScheduler(
            container, RecommendationSettings(interval_seconds=0.01)
        )
        calls = []

        async def failing_refresh():
            calls.append(1)
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(scheduler, "_refresh", failing_refresh)

        # Act
        scheduler.start()
        await asyncio.sleep(0.1)

        # Assert
        assert len(calls) >= 2
        assert scheduler.running
        await scheduler.stop()
