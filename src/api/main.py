"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures logging, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.memory import InMemoryUserStore
from src.adapters.repository.postgres import PostgresUserStore, run_migrations
from src.api.errors import register_exception_handlers
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Signup API v1 - Register accounts with email and password",
    },
]


def configure_logging(level: str) -> None:
    """Configure root logging once for the service process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Builds the configured user store (PostgreSQL pool or in-memory)
    - Runs migrations on startup (PostgreSQL only)
    - Closes connection pool on shutdown
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting application...")

    pool = None
    if settings.store_backend == "memory":
        logger.info("Using in-memory user store")
        app.state.user_store = InMemoryUserStore()
    else:
        logger.info("Connecting to database...")
        timeout_ms = int(settings.store_timeout_seconds * 1000)
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            kwargs={"options": f"-c statement_timeout={timeout_ms}"},
            timeout=settings.store_timeout_seconds,
            open=True,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        app.state.pool = pool
        app.state.user_store = PostgresUserStore(pool, timeout=settings.store_timeout_seconds)

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="signup-service",
    description="Account signup API - Validates, deduplicates and stores new users",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with store validation.

    Returns 200 OK if application and user store are healthy.
    Returns 503 (via the StoreUnavailable handler) if the store is unreachable.
    """
    request.app.state.user_store.ping()
    return {"status": "healthy"}
