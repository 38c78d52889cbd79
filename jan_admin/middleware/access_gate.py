"""Access-control gate middleware.

Redirects /admin page requests based on the presence of the access-token
cookie. This is a navigation gate only: the cookie is never verified here,
the Jan API authorizes every proxied call itself.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from jan_admin.auth.cookies import get_access_token
from jan_admin.config import (
    ADMIN_PREFIX,
    HOME_PATH,
    LOGIN_CALLBACK_PATH,
    LOGIN_PATH,
    get_config,
)

log = logging.getLogger("jan-admin.access-gate")

# Admin pages reachable without a session (prefix match)
PUBLIC_ADMIN_PATHS: tuple[str, ...] = (
    LOGIN_PATH,
    LOGIN_CALLBACK_PATH,
)


class GateDecision(str, enum.Enum):
    ALLOW = "allow"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_HOME = "redirect_home"


def is_public_admin_path(path: str) -> bool:
    return any(path.startswith(route) for route in PUBLIC_ADMIN_PATHS)


def is_admin_path(path: str) -> bool:
    return path.startswith(ADMIN_PREFIX)


def decide_access(path: str, has_token: bool) -> GateDecision:
    """Decide what to do with a request from its path and cookie presence."""
    is_public = is_public_admin_path(path)

    if is_admin_path(path) and not is_public and not has_token:
        return GateDecision.REDIRECT_LOGIN

    if is_public and has_token:
        return GateDecision.REDIRECT_HOME

    return GateDecision.ALLOW


def login_redirect_url(request: Request) -> str:
    url = request.url.replace(path=LOGIN_PATH)
    return str(url.include_query_params(next=request.url.path))


def home_redirect_url(request: Request) -> str:
    return str(request.url.replace(path=HOME_PATH))


class AccessGateMiddleware(BaseHTTPMiddleware):
    """Middleware that keeps anonymous users out of admin pages.

    - anonymous request to a protected /admin page -> /admin/login?next=<path>
    - request with a cookie to a login page -> /admin/overview
    - anything else passes through untouched
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        has_token = get_access_token(request, get_config()) is not None

        decision = decide_access(path, has_token)
        if decision is GateDecision.REDIRECT_LOGIN:
            log.debug("No session cookie for %s, redirecting to login", path)
            return RedirectResponse(url=login_redirect_url(request), status_code=307)
        if decision is GateDecision.REDIRECT_HOME:
            log.debug("Session cookie present on %s, redirecting home", path)
            return RedirectResponse(url=home_redirect_url(request), status_code=307)

        return await call_next(request)
