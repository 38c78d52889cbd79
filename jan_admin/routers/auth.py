"""Authentication router.

Proxies login, Google OAuth, refresh, logout and session lookups to the
Jan API and translates the results into the access-token cookie.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from jan_admin.auth.cookies import (
    copy_set_cookies_from_upstream,
    delete_access_token_cookie,
    set_access_token_cookie,
)
from jan_admin.auth.schemas import (
    AccessTokenResponse,
    GoogleCallbackRequest,
    LocalLoginRequest,
    first_error_message,
)
from jan_admin.upstream import (
    UPSTREAM_ERRORS,
    UpstreamClient,
    UpstreamNotConfigured,
    error_response,
    get_upstream,
    read_json,
    upstream_error_message,
)

log = logging.getLogger("jan-admin.auth-router")

router = APIRouter(prefix="/api/jan/auth", tags=["auth"])


async def _read_body(request: Request):
    try:
        return await request.json()
    except ValueError:
        return None


def _session_response(upstream, upstream_client: UpstreamClient) -> JSONResponse:
    """Echo an upstream token body and turn it into local cookies."""
    body = read_json(upstream)
    if body is None:
        body = {}
    response = JSONResponse(content=body)
    tokens = AccessTokenResponse.from_body(body)
    if tokens.has_token:
        set_access_token_cookie(
            response, tokens.access_token, tokens.expires_in, upstream_client.config
        )
    copy_set_cookies_from_upstream(upstream, response)
    return response


@router.post("/local/login")
async def local_login(
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    """Log in with email and password.

    The payload is validated locally before anything is sent upstream.
    """
    raw = await _read_body(request)
    try:
        payload = LocalLoginRequest.model_validate(raw)
    except ValidationError as e:
        return error_response(400, first_error_message(e))

    try:
        upstream = await upstream_client.request(
            request,
            "POST",
            "/v1/auth/local/login",
            json_body=payload.model_dump(),
            send_body=True,
        )
        if upstream.is_error:
            return error_response(
                upstream.status_code,
                upstream_error_message(upstream, "Invalid email or password"),
            )
        log.info("Local login succeeded")
        return _session_response(upstream, upstream_client)
    except UPSTREAM_ERRORS as e:
        log.exception("Local login failed: %s", e)
        return error_response(500, "Unable to complete login. Please retry.")


@router.get("/google/login")
async def google_login(
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    """Fetch the Google authorization URL for client-side navigation."""
    try:
        upstream = await upstream_client.request(
            request, "GET", "/v1/auth/google/login"
        )
        if upstream.is_error:
            return error_response(502, "Unable to initialise Google login")
        body = upstream.json()
        return JSONResponse(content={"redirectUrl": body.get("url")})
    except (*UPSTREAM_ERRORS, AttributeError) as e:
        log.exception("Google login start failed: %s", e)
        return error_response(500, "Unexpected error starting Google login")


@router.post("/google/callback")
async def google_callback(
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    """Exchange a Google authorization code for a console session."""
    raw = await _read_body(request)
    try:
        payload = GoogleCallbackRequest.model_validate(raw)
    except ValidationError:
        return error_response(400, "Invalid payload")

    try:
        upstream = await upstream_client.request(
            request,
            "POST",
            "/v1/auth/google/callback",
            json_body=payload.model_dump(),
            send_body=True,
        )
        if upstream.is_error:
            return error_response(
                upstream.status_code,
                upstream_error_message(upstream, "Google authentication failed"),
            )
        log.info("Google login succeeded")
        return _session_response(upstream, upstream_client)
    except UPSTREAM_ERRORS as e:
        log.exception("Google callback failed: %s", e)
        return error_response(500, "Unexpected error completing Google login")


@router.get("/refresh-token")
async def refresh_token(
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    """Swap the current session for a fresh access token.

    A failed refresh leaves the existing cookie in place.
    """
    try:
        upstream = await upstream_client.request(
            request, "GET", "/v1/auth/refresh-token"
        )
        if upstream.is_error:
            return error_response(upstream.status_code, "Unable to refresh")
        return _session_response(upstream, upstream_client)
    except UPSTREAM_ERRORS as e:
        log.exception("Session refresh failed: %s", e)
        return error_response(500, "Unexpected refresh error")


@router.post("/logout")
async def logout(
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    """Revoke the upstream session and always clear the local cookie."""
    try:
        upstream = await upstream_client.request(request, "GET", "/v1/auth/logout")
        if upstream.is_error:
            response = error_response(500, "Failed to revoke session")
        else:
            response = JSONResponse(content={"success": True})
            log.info("User logged out")
        copy_set_cookies_from_upstream(upstream, response)
    except (*UPSTREAM_ERRORS, UpstreamNotConfigured) as e:
        log.warning("Logout failed upstream: %s", e)
        response = error_response(500, "Unexpected logout error")

    delete_access_token_cookie(response, upstream_client.config)
    return response


@router.get("/me")
async def me(
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    """Return the upstream identity for the current cookie."""
    try:
        upstream = await upstream_client.request(request, "GET", "/v1/auth/me")
        if upstream.is_error:
            return error_response(upstream.status_code, "Unauthorized")
        return JSONResponse(content=upstream.json())
    except UPSTREAM_ERRORS as e:
        log.exception("Session lookup failed: %s", e)
        return error_response(500, "Unable to load session")
