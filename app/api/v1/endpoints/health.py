"""Health check endpoints. No caller header; used for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.infrastructure.persistence.database import ping_database
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=get_settings().app_version)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 if ready; 503 if a configured database does not answer.

    Redis is optional: an unavailable cache is reported but does not fail
    readiness (access resolution falls back to the database).
    """
    db_ok = await ping_database()
    if db_ok is False:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message="database unreachable").model_dump(),
        )
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        cache_status = "disabled"
    else:
        cache_status = "ok" if cache.is_available() else "unavailable"
    return ReadinessResponse(
        database="not_configured" if db_ok is None else "ok",
        cache=cache_status,
    )
