"""YelpCamp — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery), in matching order
    - The database manager is built in the lifespan and stored on app.state;
      startup fails when the database is unreachable
    - Global error handlers map every failure to the error page with its status code
    - Unmatched method/path resolves to 404 through the same handlers

Design Decisions:
    - create_app() factory: tests and scripts build apps with their own Settings
    - Lifespan over @app.on_event: cleaner teardown (engine disposed on shutdown)
    - OpenAPI/docs routes disabled: the HTTP surface is exactly the page routes
    - MethodOverrideMiddleware outermost so routing sees the overridden method
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from yelpcamp.api.error_handlers import register_error_handlers
from yelpcamp.api.method_override import MethodOverrideMiddleware
from yelpcamp.api.routes import campgrounds, health, home, reviews
from yelpcamp.config import Settings, get_settings
from yelpcamp.core.errors import DatabaseError
from yelpcamp.infrastructure.database import DatabaseSessionManager
from yelpcamp.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        await db_manager.init(create_schema=settings.database_create_schema)
    except DatabaseError:
        await db_manager.close()
        raise
    app.state.db_manager = db_manager
    logger.info("YelpCamp started")
    try:
        yield
    finally:
        logger.info("YelpCamp shutting down")
        await db_manager.close()
        app.state.db_manager = None


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="YelpCamp", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    app.state.settings = settings or get_settings()
    app.state.db_manager = None

    app.add_middleware(MethodOverrideMiddleware)

    app.include_router(home.router)
    app.include_router(campgrounds.router)
    app.include_router(reviews.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


app = create_app()
