"""Recipes Data Provider API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RecipesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database bootstrapped (create + migrate) and pool opened on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Bootstrap before init_db: the pool never connects to a database that does not exist yet
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipes_data_provider.api.error_handlers import register_error_handlers
from recipes_data_provider.api.routes import health, recipes
from recipes_data_provider.config import get_settings
from recipes_data_provider.infrastructure.database import close_db, init_db
from recipes_data_provider.infrastructure.migrations import bootstrap_database
from recipes_data_provider.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.migrate_on_startup:
        await bootstrap_database(settings.database_url, settings.database_name)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Recipes Data Provider started")
    yield
    await close_db()
    logger.info("Recipes Data Provider shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Recipes Data Provider", version="1.0.0", lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )
    application.include_router(health.router)
    application.include_router(recipes.router)
    register_error_handlers(application)
    return application


app = create_app()
