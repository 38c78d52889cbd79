"""Session service.

Login, Google OAuth, refresh, logout and identity lookups against the
console's /api/jan/auth endpoints. The console sets and clears the
access-token cookie; this client only carries it.
"""

from __future__ import annotations

import logging

import httpx

from jan_admin.auth.schemas import AccessTokenResponse, LocalLoginRequest
from jan_admin.schemas.organization import AdminSession
from jan_admin.services.base import (
    ResourceService,
    ServiceError,
    error_message,
    validate_input,
)

log = logging.getLogger("jan-admin.services.session")

AUTH_PATH = "/api/jan/auth"
SESSION_STALE_SECONDS = 60.0


class SessionService(ResourceService):
    resource = "admin-session"

    async def me(self) -> AdminSession:
        """Current identity, cached for a minute and never retried.

        Raises ServiceError("unauthorized", 401) when there is no session.
        """

        async def loader() -> AdminSession:
            try:
                response = await self.client.request("GET", f"{AUTH_PATH}/me")
            except httpx.HTTPError as e:
                raise ServiceError("failed") from e
            if response.status_code == 401:
                raise ServiceError("unauthorized", status_code=401)
            if response.is_error:
                raise ServiceError("failed", status_code=response.status_code)
            try:
                return AdminSession.model_validate(response.json())
            except ValueError as e:
                raise ServiceError("failed", status_code=response.status_code) from e

        return await self.cache.fetch(
            self.resource, None, loader, ttl=SESSION_STALE_SECONDS
        )

    async def _token_call(
        self, method: str, path: str, *, failure: str, json_body=None
    ) -> AccessTokenResponse:
        try:
            response = await self.client.request(method, path, json_body=json_body)
        except httpx.HTTPError as e:
            raise ServiceError(failure) from e
        if response.is_error:
            raise ServiceError(
                error_message(response, failure), status_code=response.status_code
            )
        self.invalidate()
        try:
            return AccessTokenResponse.from_body(response.json())
        except ValueError:
            return AccessTokenResponse()

    async def login(self, email: str, password: str) -> AccessTokenResponse:
        """Log in with email and password.

        Input is validated here first, so a malformed email or password
        never reaches the network.
        """
        payload = validate_input(
            LocalLoginRequest, {"email": email, "password": password}
        )
        return await self._token_call(
            "POST",
            f"{AUTH_PATH}/local/login",
            json_body=payload.model_dump(),
            failure="Invalid email or password",
        )

    async def google_login_url(self) -> str:
        failure = "Unable to initialise Google login"
        try:
            response = await self.client.request("GET", f"{AUTH_PATH}/google/login")
        except httpx.HTTPError as e:
            raise ServiceError(failure) from e
        if response.is_error:
            raise ServiceError(
                error_message(response, failure), status_code=response.status_code
            )
        try:
            redirect_url = response.json().get("redirectUrl")
        except (ValueError, AttributeError) as e:
            raise ServiceError(failure) from e
        if not redirect_url:
            raise ServiceError(failure)
        return redirect_url

    async def google_callback(self, code: str, state: str) -> AccessTokenResponse:
        return await self._token_call(
            "POST",
            f"{AUTH_PATH}/google/callback",
            json_body={"code": code, "state": state},
            failure="Google authentication failed",
        )

    async def refresh(self) -> AccessTokenResponse:
        return await self._token_call(
            "GET",
            f"{AUTH_PATH}/refresh-token",
            failure="Unable to refresh",
        )

    async def logout(self) -> None:
        """Log out. Cached queries are dropped whatever the outcome."""
        try:
            response = await self.client.request("POST", f"{AUTH_PATH}/logout")
        except httpx.HTTPError as e:
            self.cache.invalidate()
            raise ServiceError("Unexpected logout error") from e
        self.cache.invalidate()
        if response.is_error:
            raise ServiceError(
                error_message(response, "Failed to revoke session"),
                status_code=response.status_code,
            )
        log.info("Logged out")
