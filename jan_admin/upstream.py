"""Upstream Jan API client.

Every local proxy endpoint talks to the Jan API through here. The browser's
access-token cookie becomes a bearer credential and the inbound Cookie
header is forwarded so upstream-managed cookies reach upstream.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse

from jan_admin.auth.cookies import get_access_token
from jan_admin.config import ConsoleConfig, get_config

log = logging.getLogger("jan-admin.upstream")

# Raised by httpx on transport failure, or by .json() on a malformed body.
UPSTREAM_ERRORS = (httpx.HTTPError, ValueError)


class UpstreamNotConfigured(RuntimeError):
    """JAN_API_BASE_URL is not set."""


class UpstreamClient:
    """Thin async client for the Jan API."""

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self._transport = transport

    @property
    def base_url(self) -> str:
        base_url = (self.config.api_base_url or "").strip()
        if not base_url:
            raise UpstreamNotConfigured("Upstream API not configured")
        return base_url.rstrip("/")

    def build_headers(self, request: Request) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            headers["X-Request-Id"] = request_id
        token = get_access_token(request, self.config)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        cookie_header = request.headers.get("cookie")
        if cookie_header:
            headers["Cookie"] = cookie_header
        return headers

    async def request(
        self,
        request: Request,
        method: str,
        path: str,
        *,
        params: Any = None,
        json_body: Any = None,
        send_body: bool = False,
    ) -> httpx.Response:
        """Send one request upstream and return the raw response.

        Transport failures propagate as httpx.HTTPError; status codes are
        left for the caller to interpret.
        """
        base_url = self.base_url
        headers = self.build_headers(request)
        content = None
        if send_body:
            headers["Content-Type"] = "application/json"
            content = json.dumps(json_body)

        # follow_redirects=False keeps the proxy from chasing upstream redirects.
        async with httpx.AsyncClient(
            base_url=base_url,
            timeout=self.config.upstream_timeout_seconds,
            follow_redirects=False,
            transport=self._transport,
        ) as client:
            response = await client.request(
                method,
                path,
                params=params,
                content=content,
                headers=headers,
            )

        if response.status_code >= 400:
            log.warning(
                "upstream rejected %s %s: %s",
                method,
                path,
                response.status_code,
                extra={"request_id": headers.get("X-Request-Id")},
            )
        return response


def read_json(response: httpx.Response) -> Any:
    """Parse an upstream body, returning None when it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return None


def upstream_error_message(response: httpx.Response, fallback: str) -> str:
    body = read_json(response)
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message:
            return message
    return fallback


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def get_upstream(request: Request) -> UpstreamClient:
    """Upstream client dependency.

    An app may pin a client on app.state.upstream; otherwise one is built
    from the current config.
    """
    client = getattr(request.app.state, "upstream", None)
    if client is None:
        client = UpstreamClient(get_config())
    return client
