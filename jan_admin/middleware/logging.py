"""Per-request access log.

One "request" record per request, at a level that follows the response
status. Only the presence of the session cookie is recorded, never its
value.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from jan_admin.auth.cookies import get_access_token

log = logging.getLogger("jan-admin.access")

# Polled by load balancers
_QUIET_PATHS = frozenset({"/health"})


def _level_for(path: str, status_code: int) -> int:
    if path in _QUIET_PATHS:
        return logging.DEBUG
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request once its response is ready."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        path = request.url.path

        log.log(
            _level_for(path, response.status_code),
            "request",
            extra={
                "request_id": getattr(request.state, "request_id", None),
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                "has_session": get_access_token(request) is not None,
                "redirect_to": response.headers.get("location"),
                "client_ip": request.client.host if request.client else None,
            },
        )
        return response
