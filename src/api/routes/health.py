"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from src.application.dto.responses import HealthResponse
from src.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status, uptime and the active storage backend.
    """
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        storage_backend=settings.storage.backend,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """
    Database health check.

    Tests SQLite connectivity. Reports the memory backend as healthy.
    """
    settings = get_settings()
    status_str = "healthy"

    if settings.storage.backend == "sqlite":
        from src.infrastructure.storage.sqlite import get_pool

        pool = await get_pool()
        if not await pool.ping():
            status_str = "unhealthy"

    return HealthResponse(
        status=status_str,
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        storage_backend=settings.storage.backend,
    )
