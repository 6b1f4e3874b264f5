"""Main API router combining all v1 route modules.

Aggregates all routers under the ``/api/v1`` prefix so the
FastAPI application only needs to include a single router.

Includes:
    * Health: liveness and readiness checks
    * Rights: advisory bundles, directories and timeline scaling
"""

from __future__ import annotations

from fastapi import APIRouter

from src.api.v1 import health, rights

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(health.router)
api_router.include_router(rights.router)
