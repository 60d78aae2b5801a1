"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from inventory_costing import __version__
from inventory_costing.application.dto.responses import HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """
    Database health check.

    Tests SQLite connectivity.
    """
    from inventory_costing.infrastructure.storage.sqlite import get_connection_pool

    try:
        pool = await get_connection_pool()
        async with pool.acquire() as conn:
            await conn.execute("SELECT 1")
        database = "available"
    except Exception as e:
        database = f"unavailable: {e}"

    return HealthResponse(
        status="healthy" if database == "available" else "unhealthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        database=database,
    )
