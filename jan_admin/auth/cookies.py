"""Access-token cookie handling.

Writes and clears the access-token cookie and relays upstream Set-Cookie
headers verbatim.
"""

from __future__ import annotations

from typing import Optional

import httpx
from fastapi import Request, Response

from jan_admin.config import ConsoleConfig, get_config

COOKIE_PATH = "/"
COOKIE_SAMESITE = "lax"


def get_access_token(
    request: Request, config: Optional[ConsoleConfig] = None
) -> Optional[str]:
    """Return the access-token cookie value, treating empty as absent."""
    config = config or get_config()
    value = request.cookies.get(config.access_cookie_name)
    return value or None


def set_access_token_cookie(
    response: Response,
    token: str,
    expires_in: float,
    config: Optional[ConsoleConfig] = None,
) -> None:
    """Attach the access-token cookie with a lifetime of expires_in seconds."""
    config = config or get_config()
    response.set_cookie(
        key=config.access_cookie_name,
        value=token,
        max_age=int(expires_in),
        path=COOKIE_PATH,
        httponly=True,
        secure=config.is_prod,
        samesite=COOKIE_SAMESITE,
    )


def delete_access_token_cookie(
    response: Response, config: Optional[ConsoleConfig] = None
) -> None:
    """Expire the access-token cookie immediately."""
    config = config or get_config()
    response.delete_cookie(
        key=config.access_cookie_name,
        path=COOKIE_PATH,
        httponly=True,
        secure=config.is_prod,
        samesite=COOKIE_SAMESITE,
    )


def copy_set_cookies_from_upstream(
    upstream: httpx.Response, response: Response
) -> None:
    """Append every upstream Set-Cookie header to the outgoing response unchanged."""
    for cookie in upstream.headers.get_list("set-cookie"):
        response.headers.append("set-cookie", cookie)
