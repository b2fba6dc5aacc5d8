"""Roster API — FastAPI application factory and ASGI entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Each application owns exactly one store and one health reporter (app.state)
    - Global error handlers map RosterError → envelope JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app() factory: tests build isolated apps instead of resetting a global store
    - Lifespan over @app.on_event: logging configured once on startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.error_handlers import register_error_handlers
from roster.api.routes import health, root, users
from roster.config import Settings, get_settings
from roster.core.health import HealthReporter
from roster.core.repository_protocols import UserRepository
from roster.infrastructure.observability import setup_logging
from roster.infrastructure.user_store import InMemoryUserStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: UserRepository | None = None,
    health_reporter: HealthReporter | None = None,
) -> FastAPI:
    """Build a fully wired application around the given (or fresh) components."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"{settings.service_name} started")
        yield
        logger.info(f"{settings.service_name} shutting down")

    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.user_store = store if store is not None else InMemoryUserStore()
    app.state.health_reporter = health_reporter or HealthReporter()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
