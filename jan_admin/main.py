"""Jan Admin Console application factory.

Serves the organization admin console: page shells behind a cookie gate,
and local /api/jan proxy endpoints in front of the Jan API.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jan_admin.config import DEV_CORS_ORIGINS, ConsoleConfig, get_config
from jan_admin.middleware.access_gate import AccessGateMiddleware
from jan_admin.middleware.logging import StructuredLoggingMiddleware
from jan_admin.middleware.request_id import RequestIdMiddleware
from jan_admin.routers import auth_router, organization_router, pages_router
from jan_admin.upstream import UpstreamNotConfigured, error_response

SERVICE_NAME = "jan-admin"
VERSION = "0.1.0"
API_VERSION = "v1"

log = logging.getLogger(SERVICE_NAME)

ops_router = APIRouter(tags=["ops"])


@ops_router.get("/health")
async def health(request: Request) -> dict:
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": getattr(request.state, "request_id", None),
        "upstream_configured": get_config().upstream_configured,
    }


@ops_router.get("/version")
async def version() -> dict:
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "api_version": API_VERSION,
        "build_commit": os.getenv("JAN_BUILD_COMMIT"),
        "build_time": os.getenv("JAN_BUILD_TIME"),
    }


async def _upstream_not_configured(
    request: Request, exc: UpstreamNotConfigured
) -> JSONResponse:
    log.error("Upstream call on %s without JAN_API_BASE_URL", request.url.path)
    return error_response(503, str(exc))


def _check_config(config: ConsoleConfig) -> None:
    problems = config.validate()
    if problems:
        summary = "; ".join(problems)
        log.error("Configuration validation failed: %s", summary)
        raise RuntimeError(f"Configuration validation failed: {summary}")
    if not config.upstream_configured:
        log.warning("JAN_API_BASE_URL not set, proxy endpoints will answer 503")


def _cors_origins(config: ConsoleConfig) -> list[str]:
    """Configured origins, or the local dev origins outside production."""
    if config.cors_origins:
        return list(config.cors_origins)
    if config.is_prod:
        raise RuntimeError(
            "JAN_CORS_ORIGINS must be set in production (no wildcard allowed)"
        )
    log.warning("JAN_CORS_ORIGINS not set, using dev defaults: %s", DEV_CORS_ORIGINS)
    return DEV_CORS_ORIGINS.split(",")


def build_app() -> FastAPI:
    """Build the console app from the current environment."""
    config = get_config()
    _check_config(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info(
            "Starting %s v%s against %s",
            SERVICE_NAME,
            VERSION,
            config.api_base_url or "<unconfigured upstream>",
            extra={"env": config.env_lower},
        )
        yield
        log.info("Stopped %s", SERVICE_NAME)

    app = FastAPI(
        title="Jan Admin Console",
        description="Admin console backend-for-frontend for the Jan API",
        version=VERSION,
        lifespan=lifespan,
    )

    # Last added runs first: CORS, request id, access log, then the gate
    app.add_middleware(AccessGateMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(config),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-Id"],
        expose_headers=["X-Request-Id"],
    )

    app.add_exception_handler(UpstreamNotConfigured, _upstream_not_configured)

    app.include_router(ops_router)
    app.include_router(auth_router)
    app.include_router(organization_router)
    # /admin/{page:path} is a catch-all and must stay last
    app.include_router(pages_router)

    return app
