"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from board.application.scheduler import RecommendationScheduler
from board.config import Settings
from board.interface.api.routes import health, posts, votes
from board.util.di.container import create_container, setup_di
from board.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the recommendation scheduler once per process.

    The scheduler resolves its dependencies from whichever container is
    attached to the app when the lifespan starts, so tests that swap in a
    test container get a scheduler backed by it.
    """
    settings: Settings = app.state.settings
    scheduler = None

    if settings.recommendation.enabled:
        scheduler = RecommendationScheduler(
            container=app.state.dishka_container,
            settings=settings.recommendation,
        )
        scheduler.start()
    else:
        logfire.info("Recommendation scheduler disabled")

    app.state.recommendation_scheduler = scheduler
    yield

    if scheduler is not None:
        await scheduler.stop()
    await app.state.dishka_container.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Community Board API",
        description="Backend API for a community board - posts, hashtags, likes and recommendations",
        version="0.1.0",
        lifespan=lifespan,
    )
    app_instance.state.settings = settings

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup CORS middleware
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(votes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
