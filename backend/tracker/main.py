"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TrackerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store handle built in lifespan and attached to app.state; disposed on shutdown
    - Every request binds its method/path into the logging context

Design Decisions:
    - create_app() factory: tests build their own app with an injected store
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from tracker.api.error_handlers import register_error_handlers
from tracker.api.routes import health, landing, users
from tracker.config import Settings, get_settings
from tracker.infrastructure.database import DatabaseSessionManager
from tracker.infrastructure.observability import (
    bind_request, reset_request, setup_logging,
)
from tracker.infrastructure.user_store import SqlUserStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; the store is created when the app starts."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        await db_manager.create_all()
        app.state.user_store = SqlUserStore(db_manager)
        logger.info("Exercise Tracker API started")
        yield
        logger.info("Exercise Tracker API shutting down")
        await db_manager.dispose()

    app = FastAPI(
        title="Exercise Tracker API", version="1.0.0", lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        """Tag every log line emitted while handling this request."""
        token = bind_request(request.method, request.url.path)
        try:
            return await call_next(request)
        finally:
            reset_request(token)

    # Routes — explicit registration
    app.include_router(landing.router)
    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API on the configured host/port."""
    settings = get_settings()
    uvicorn.run(
        "tracker.main:app", host=settings.host, port=settings.port,
    )
