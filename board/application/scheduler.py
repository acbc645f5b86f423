"""In-process scheduler for the recommendation refresher.

One scheduler is created in the application lifespan. It owns a single
background task that runs the refresh use case on a fixed interval, each
run in its own request scope (and therefore its own transaction).
"""

import asyncio
from typing import Optional

import logfire
from dishka import AsyncContainer

from board.application.usecase.recommendation import (
    RefreshRecommendationsResponse,
    RefreshRecommendationsUseCase,
)
from board.config import RecommendationSettings


class RecommendationScheduler:
    """Runs the recommendation refresh every interval_seconds.

    Overlapping runs are skipped, not queued. A run that exceeds
    run_timeout_seconds is cancelled and its transaction rolled back.
    """

    def __init__(
        self, container: AsyncContainer, settings: RecommendationSettings
    ) -> None:
        """Initialize scheduler.

        Args:
            container: Application-scope DI container
            settings: Interval, timeout and refresh parameters
        """
        self.container = container
        self.settings = settings
        self._lock = asyncio.Lock()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        """Whether the background task is alive."""
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the background task. Calling it again is a no-op."""
        if self.running:
            logfire.warn("Recommendation scheduler already running")
            return
        self._task = asyncio.create_task(
            self._run_forever(), name="recommendation-refresher"
        )
        logfire.info(
            "Recommendation scheduler started",
            interval_seconds=self.settings.interval_seconds,
        )

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logfire.info("Recommendation scheduler stopped")

    async def run_once(self) -> Optional[RefreshRecommendationsResponse]:
        """Run one refresh unless another run is in progress.

        Returns:
            The run's result, or None if the run was skipped

        Raises:
            asyncio.TimeoutError: If the run exceeded run_timeout_seconds
        """
        if self._lock.locked():
            logfire.warn("Recommendation refresh already in progress, skipping")
            return None

        async with self._lock:
            with logfire.span("recommendation_scheduler.run_once"):
                return await asyncio.wait_for(
                    self._refresh(), timeout=self.settings.run_timeout_seconds
                )

    async def _refresh(self) -> RefreshRecommendationsResponse:
        async with self.container() as request_container:
            use_case = await request_container.get(RefreshRecommendationsUseCase)
            return await use_case.execute()

    async def _run_forever(self) -> None:
        while True:
            await asyncio.sleep(self.settings.interval_seconds)
            try:
                await self.run_once()
            except asyncio.TimeoutError:
                logfire.error(
                    "Recommendation refresh timed out",
                    timeout_seconds=self.settings.run_timeout_seconds,
                )
            except Exception as e:
                # Keep the schedule alive; the next run starts from scratch
                logfire.error("Recommendation refresh failed", error=str(e))
