"""Health check endpoints for Adhikar API v1.

Provides liveness and readiness checks for container deployments.  The
readiness check confirms that every rights content table was loaded.
"""

from __future__ import annotations

import time

import structlog
from fastapi import APIRouter, Request
from pydantic import BaseModel

from src.models.enums import RightsDomain

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str
    uptime_seconds: float


class ReadinessResponse(BaseModel):
    """Readiness check response with per-domain table statuses."""

    status: str
    checks: dict[str, str]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness check.

    Returns 200 if the application process is running and able to
    handle requests.
    """
    start_time: float = getattr(request.app.state, "start_time", time.time())
    uptime = time.time() - start_time

    return HealthResponse(
        status="healthy",
        version=request.app.version,
        uptime_seconds=round(uptime, 2),
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> ReadinessResponse:
    """Readiness check.

    Ready only when the advisory service is up and a table is loaded for
    every rights domain.
    """
    checks: dict[str, str] = {}

    service = getattr(request.app.state, "rights_advisor", None)
    if service is None:
        checks["rights_advisor"] = "not_initialised"
        for domain in RightsDomain:
            checks[domain.value] = "not_loaded"
    else:
        checks["rights_advisor"] = "ok"
        loaded = set(service.available_domains)
        for domain in RightsDomain:
            if domain in loaded:
                checks[domain.value] = f"ok ({len(service.table(domain).categories)} categories)"
            else:
                checks[domain.value] = "not_loaded"

    all_ok = all(value.startswith("ok") for value in checks.values())
    status = "ready" if all_ok else "degraded"

    logger.info("health.readiness_check", status=status, checks=checks)

    return ReadinessResponse(status=status, checks=checks)
