"""Adhikar FastAPI application entry point.

Creates the FastAPI app, configures middleware, includes routers, and
loads the static rights content tables before the first request.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from config.settings import Settings, settings
from src.api.router import api_router
from src.models.enums import RightsDomain, UrgencyLevel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Structured logging configuration
# ---------------------------------------------------------------------------


def _configure_logging(app_settings: Settings) -> None:
    """Set up structlog with JSON or console rendering based on settings."""
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if app_settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(app_settings.log_level.lower()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Application lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load content tables and build the advisory service.

    Table validation errors propagate so that a broken table stops the
    application at startup instead of surfacing on a request.
    """
    app_settings: Settings = app.state.settings
    _configure_logging(app_settings)
    logger.info("app.startup", env=app_settings.env)

    app.state.start_time = time.time()

    from src.data.loader import load_all_tables
    from src.services.rights_advisor import RightsAdvisorService

    tables = load_all_tables(app_settings.rights_data_dir)
    app.state.rights_advisor = RightsAdvisorService(tables)
    logger.info("app.rights_advisor_initialised", domains=len(tables))

    logger.info("app.startup_complete")

    yield

    logger.info("app.shutdown_complete")


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for *app_settings* (default: env settings)."""
    app_settings = app_settings or settings

    application = FastAPI(
        title="Adhikar API",
        description=(
            "Adhikar -- rights advisory service. Returns strategies, resources, "
            "legal options, action plans and urgency-scaled timelines for "
            "agriculture, business, healthcare, journalism, NRI, library, "
            "housing, education, digital, environmental, government service, "
            "women's and consumer rights issues in India."
        ),
        version="0.1.0",
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        docs_url="/docs" if not app_settings.is_production else None,
        redoc_url="/redoc" if not app_settings.is_production else None,
    )
    application.state.settings = app_settings

    # -- CORS middleware ----------------------------------------------------
    # allow_credentials=True must NOT be combined with allow_origins=["*"].
    if app_settings.is_production:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origin_list,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["Content-Type", "Authorization"],
        )
    else:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=["http://localhost:3000", "http://localhost:8000", "http://127.0.0.1:8000"],
            allow_credentials=False,
            allow_methods=["GET", "POST", "OPTIONS", "HEAD"],
            allow_headers=["Content-Type", "Accept", "Authorization"],
        )

    # -- Routers ------------------------------------------------------------
    application.include_router(api_router)
    application.add_api_route("/api", api_info, methods=["GET"], response_class=ORJSONResponse)

    return application


async def api_info() -> dict:
    """API information endpoint."""
    return {
        "name": "Adhikar API",
        "description": "Rights advisory service",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/api/v1/health",
        "endpoints": {
            "health": "/api/v1/health",
            "rights": "/api/v1/rights",
            "rights_advice": "/api/v1/rights/{domain}",
            "rights_category": "/api/v1/rights/{domain}/categories/{key}",
            "timeline": "/api/v1/rights/timeline",
        },
        "domains": [domain.value for domain in RightsDomain],
        "urgency_levels": [level.value for level in UrgencyLevel],
    }


app = create_app()
