"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware import (
    ErrorHandlerMiddleware,
    LoggingMiddleware,
    setup_exception_handlers,
)
from src.api.routes import (
    alerts_router,
    auth_router,
    commodities_router,
    dashboard_router,
    health_router,
    movements_router,
)
from src.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Initializes storage and loads the inventory on startup, closes the
    connection pool on shutdown.
    """
    settings = get_settings()
    configure_logging()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
        storage_backend=settings.storage.backend,
    )

    if settings.storage.backend == "sqlite":
        try:
            from src.infrastructure.storage.sqlite import get_connection_pool
            from src.infrastructure.storage.sqlite.migrations.migrator import run_migrations

            # Run migrations
            await run_migrations()
            logger.info("database_initialized")

            # Initialize connection pool
            await get_connection_pool()
            logger.info("connection_pool_ready")

        except Exception as e:
            logger.error("database_init_failed", error=str(e))
            raise

    # Load buckets (seeding demo data on first run)
    from src.application.services import get_inventory_repository

    await get_inventory_repository()

    logger.info("application_started")

    yield

    # Shutdown
    logger.info("application_stopping")

    if settings.storage.backend == "sqlite":
        try:
            from src.infrastructure.storage.sqlite import close_connection_pool

            await close_connection_pool()
            logger.info("connection_pool_closed")

        except Exception as e:
            logger.warning("connection_pool_close_failed", error=str(e))

    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title="StockPulse Inventory API",
        description="Commodity stock tracking with movements, alerts and trends",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(commodities_router)
    app.include_router(movements_router)
    app.include_router(alerts_router)
    app.include_router(dashboard_router)

    # Root health endpoint (for k8s/docker health checks)
    @app.get("/health")
    async def root_health() -> dict[str, str]:
        """Simple health check at root level."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    @app.get("/")
    async def root() -> dict[str, str]:
        """API info."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
