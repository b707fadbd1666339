"""
FastAPI application entry point.

This module sets up:
- Logging
- The composition root and its lifespan (storage, expiration sweeper)
- Middleware and exception handlers
- API routes
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from library.domain.clock import Clock, utc_now
from library.infrastructure.adapters.inbound.http.handlers import register_exception_handlers
from library.infrastructure.adapters.inbound.http.middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
)
from library.infrastructure.adapters.inbound.http.routes import (
    books,
    health,
    reservations,
    users,
)
from library.infrastructure.config.container import Container
from library.infrastructure.config.logging import setup_logging
from library.infrastructure.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
    clock: Clock = utc_now,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (loaded from the environment if omitted)
        container: Pre-built composition root, mainly for tests
        clock: Source of the current time when the container is built here

    Returns:
        Configured FastAPI application
    """
    settings = settings or (container.settings if container else get_settings())
    container = container or Container(settings, clock=clock)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} v{settings.version}")
        logger.info(
            f"Environment: {settings.environment}, "
            f"reservation store: {settings.reservation_store}"
        )
        await container.startup()

        yield

        logger.info("Shutting down application")
        await container.shutdown()

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.container = container

    register_exception_handlers(app)

    # Request ID middleware is added last so it wraps the logging middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health.router)
    app.include_router(reservations.router)
    app.include_router(users.router)
    app.include_router(books.router)

    return app


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
