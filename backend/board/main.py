"""Message Board API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BoardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - create_app factory plus module-level app: uvicorn serves board.main:app,
      tests build the same app and override the store dependency
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from board.api.error_handlers import register_error_handlers
from board.api.routes import health, messages
from board.config import Settings, get_settings
from board.infrastructure.database import close_db, init_db
from board.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        init_db(
            settings.database_url,
            auto_create=settings.database_auto_create,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )
        logger.info("Message Board API started")
        yield
        close_db()
        logger.info("Message Board API shutting down")

    app = FastAPI(
        title="Message Board API", version="1.0.0", lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes, registered explicitly
    app.include_router(health.router)
    app.include_router(messages.router)

    register_error_handlers(app)
    return app


app = create_app()
