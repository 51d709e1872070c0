"""FastAPI application factory"""

import asyncio
import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from . import __version__
from .core.config import Settings, get_settings
from .core.logging import setup_logging
from .repositories import MatchRepository, ProfileRepository
from .routers import matches_router, profiles_router, queue_router
from .services import MatchQueue

logger = logging.getLogger(__name__)


async def _heartbeat(app: FastAPI, interval: int) -> None:
    """Periodic heartbeat — log uptime and queue/match counts"""
    while True:
        await asyncio.sleep(interval)
        uptime = int(time.time() - app.state.start_time)
        logger.info(
            f"Heartbeat: uptime={uptime}s, profiles={app.state.profiles.count()}, "
            f"queued={app.state.match_queue.size()}, matches={app.state.matches.count()}"
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application"""
    settings = settings or get_settings()

    # Setup logging first
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Handle startup and shutdown"""
        logger.info("Starting matchmaker")
        logger.info(f"Environment: {settings.environment}")

        # Fresh state per application; nothing survives a restart
        app.state.start_time = time.time()
        app.state.profiles = ProfileRepository()
        app.state.matches = MatchRepository()
        app.state.match_queue = MatchQueue(app.state.profiles, app.state.matches)

        heartbeat_task: asyncio.Task | None = None
        if settings.enable_heartbeat:
            heartbeat_task = asyncio.create_task(_heartbeat(app, settings.heartbeat_interval))
            logger.info(f"Heartbeat started (interval={settings.heartbeat_interval}s)")

        yield

        logger.info("Shutting down matchmaker")
        if heartbeat_task:
            heartbeat_task.cancel()

    app = FastAPI(
        title="Matchmaker API",
        description="In-memory matchmaking: profiles, random pairing queue and matches",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(profiles_router.router)
    app.include_router(queue_router.router)
    app.include_router(matches_router.router)

    @app.get("/")
    async def root():
        """Root endpoint - minimal service info"""
        return {"service": "matchmaker", "status": "running"}

    # Liveness probe — always 200
    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "uptime_seconds": int(time.time() - app.state.start_time),
        }

    @app.get("/status")
    async def status():
        """Status endpoint with in-memory state counts"""
        return {
            "service": "matchmaker",
            "version": __version__,
            "uptime_seconds": int(time.time() - app.state.start_time),
            "profiles": app.state.profiles.count(),
            "queued": app.state.match_queue.size(),
            "matches": app.state.matches.count(),
            "environment": settings.environment,
        }

    @app.api_route("/ping", methods=["GET", "HEAD"], response_class=PlainTextResponse)
    async def ping():
        """Ping endpoint"""
        return "pong"

    logger.info("FastAPI application configured")

    return app
