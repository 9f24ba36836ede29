"""
Health check endpoints for monitoring and orchestration (K8s, Docker, etc.)

- /health, /health/live: liveness (always 200 while the process runs)
- /health/db: database connectivity
- /health/ready: readiness; checks the database unless the service runs on
  the in-memory store
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "applications-service"


async def _database_healthy(session: AsyncSession) -> bool:
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        return True
    except Exception as e:
        logger.error("Database health check failed", exc_info=e)
        return False


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(session: AsyncSession = Depends(get_db_session)):
    if await _database_healthy(session):
        return {"status": "healthy", "component": "database"}
    return JSONResponse(
        status_code=503,
        content={
            "status": "unhealthy",
            "component": "database",
            "error": "Database connection failed",
        },
    )


@router.get("/health/ready")
async def health_check_ready(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """
    Readiness check.

    Sibling services are not queried: their outages only degrade individual
    requests (503 on mandatory lookups), never the readiness of this service.
    """
    checks: dict[str, str] = {}
    if settings.use_in_memory:
        checks["storage"] = "in-memory"
    elif await _database_healthy(session):
        checks["database"] = "healthy"
    else:
        checks["database"] = "unhealthy"
        return JSONResponse(status_code=503, content={"status": "not_ready", "checks": checks})

    return {"status": "ready", "checks": checks}
