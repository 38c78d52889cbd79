"""Console HTTP client and the resource service base.

Services call the console's own /api/jan endpoints (never the Jan API
directly), validate what comes back, and keep reads in a QueryCache.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from jan_admin.auth.schemas import first_error_message
from jan_admin.services.cache import QueryCache

log = logging.getLogger("jan-admin.services")

ModelT = TypeVar("ModelT", bound=BaseModel)

# Single retry for reads
DEFAULT_READ_RETRIES = 1


class ServiceError(Exception):
    """A resource call failed; message is safe to show to the user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConsoleClient:
    """Async HTTP client for the console, holding its cookies like a browser."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 15.0,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            follow_redirects=False,
        )

    @property
    def cookies(self) -> httpx.Cookies:
        return self._client.cookies

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json_body: Any = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        if json_body is not None:
            kwargs["json"] = json_body
        return await self._client.request(method, path, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ConsoleClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def error_message(response: httpx.Response, fallback: str) -> str:
    """Return the console's {"error": ...} message, or fallback."""
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"] or fallback
    return fallback


def validate_input(model: type[ModelT], data: Any) -> ModelT:
    """Validate local input before anything goes on the wire."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ServiceError(first_error_message(e), status_code=400) from e


class ResourceService:
    """Base for one upstream resource collection.

    Subclasses set `resource` (the cache namespace) and build their calls
    on _read and _write.
    """

    resource: str = ""

    def __init__(
        self,
        client: ConsoleClient,
        cache: QueryCache,
        *,
        retries: int = DEFAULT_READ_RETRIES,
    ):
        self.client = client
        self.cache = cache
        self.retries = retries

    async def _load(
        self,
        path: str,
        model: type[ModelT],
        *,
        params: Optional[Mapping[str, Any]],
        failure: str,
        retries: int,
    ) -> ModelT:
        last_error: Optional[BaseException] = None
        status_code: Optional[int] = None
        for attempt in range(retries + 1):
            try:
                response = await self.client.request("GET", path, params=params)
                if response.is_error:
                    status_code = response.status_code
                    last_error = None
                    log.debug(
                        "GET %s failed with %s (attempt %d)",
                        path,
                        status_code,
                        attempt + 1,
                    )
                    continue
                # ValidationError is a ValueError; schema drift reads as a load failure
                return model.model_validate(response.json())
            except (httpx.HTTPError, ValueError) as e:
                last_error = e
                status_code = None
                log.debug("GET %s failed: %s (attempt %d)", path, e, attempt + 1)
        raise ServiceError(failure, status_code=status_code) from last_error

    async def _read(
        self,
        path: str,
        model: type[ModelT],
        *,
        failure: str,
        params: Optional[Mapping[str, Any]] = None,
        retries: Optional[int] = None,
        ttl: Optional[float] = None,
        resource: Optional[str] = None,
    ) -> ModelT:
        """Cached, validated GET with the configured retry."""
        attempts = self.retries if retries is None else retries

        async def loader() -> ModelT:
            return await self._load(
                path, model, params=params, failure=failure, retries=attempts
            )

        return await self.cache.fetch(
            resource or self.resource, params, loader, ttl=ttl
        )

    async def _write(
        self,
        method: str,
        path: str,
        *,
        failure: str,
        json_body: Any = None,
        model: Optional[type[ModelT]] = None,
        invalidates: tuple[str, ...] = (),
        resource: Optional[str] = None,
    ) -> Any:
        """Send a mutation once; on success drop the cached reads it affects.

        `resource` names the cache namespace the write belongs to when it is
        not the service default.
        """
        try:
            response = await self.client.request(method, path, json_body=json_body)
        except httpx.HTTPError as e:
            raise ServiceError(failure) from e

        if response.is_error:
            raise ServiceError(
                error_message(response, failure), status_code=response.status_code
            )

        self.cache.invalidate(resource or self.resource)
        for related in invalidates:
            self.cache.invalidate(related)

        try:
            body = response.json()
        except ValueError:
            body = None
        if model is None:
            return body
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise ServiceError(failure, status_code=response.status_code) from e

    def invalidate(self) -> None:
        self.cache.invalidate(self.resource)

