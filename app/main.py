import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.deps import engine
from app.api.routers.applications import router as applications_router
from app.api.routers.health import router as health_router
from app.api.routers.leases import router as leases_router
from app.domain.errors import (
    DomainError,
    MicroserviceUnavailableError,
    NotFoundError,
)
from app.infrastructure.db.tables import metadata

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield
    await engine.dispose()

app = FastAPI(
    title="Rentify Applications API",
    version="0.1.0",
    lifespan=lifespan
)


def _status_for(exc: DomainError) -> tuple[int, str]:
    if isinstance(exc, NotFoundError):
        return 404, "Not Found"
    if isinstance(exc, MicroserviceUnavailableError):
        return 503, "Service Unavailable"
    return 400, "Bad Request"


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    status_code, error = _status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Request failed with domain error",
        extra={
            "code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "http_status": status_code,
        },
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": status_code,
            "error": error,
            "code": exc.code,
            "message": exc.message,
        },
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": 500,
            "error": "Internal Server Error",
            "code": "INTERNAL_ERROR",
            "error_id": error_id,
            "message": "Ocurrió un error inesperado. Contacte a soporte con el error_id si persiste.",
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(applications_router, prefix="/api/v1", tags=["Applications"])
app.include_router(leases_router, prefix="/api/v1", tags=["Leases"])
