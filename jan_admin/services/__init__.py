"""Resource services for the admin console.

A Console owns one ConsoleClient and one QueryCache and exposes one
service per resource:

    async with Console("https://console.example.com") as console:
        await console.session.login(email, password)
        projects = await console.projects.list()
"""

from __future__ import annotations

from typing import Callable, Optional

import httpx

from jan_admin.config import get_config
from jan_admin.services.api_keys import ApiKeysService
from jan_admin.services.audit_logs import AuditLogsService
from jan_admin.services.base import ConsoleClient, ResourceService, ServiceError
from jan_admin.services.cache import QueryCache
from jan_admin.services.invites import InvitesService
from jan_admin.services.members import MembersService
from jan_admin.services.overview import OverviewService
from jan_admin.services.projects import ProjectsService
from jan_admin.services.providers import ProvidersService
from jan_admin.services.refresher import SessionRefresher
from jan_admin.services.session import SessionService
from jan_admin.services.settings import SettingsService


class Console:
    """Client-side entry point bundling the resource services."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        cache: Optional[QueryCache] = None,
        client: Optional[ConsoleClient] = None,
    ):
        self.client = client or ConsoleClient(base_url, transport=transport)
        self.cache = cache or QueryCache()
        self.session = SessionService(self.client, self.cache)
        self.overview = OverviewService(self.client, self.cache)
        self.projects = ProjectsService(self.client, self.cache)
        self.providers = ProvidersService(self.client, self.cache)
        self.invites = InvitesService(self.client, self.cache)
        self.members = MembersService(self.client, self.cache)
        self.api_keys = ApiKeysService(self.client, self.cache)
        self.settings = SettingsService(self.client, self.cache)
        self.audit_logs = AuditLogsService(self.client, self.cache)

    def refresher(
        self,
        current_path: Callable[[], str],
        *,
        interval: Optional[float] = None,
        is_visible: Optional[Callable[[], bool]] = None,
    ) -> SessionRefresher:
        """Build a refresher; interval defaults to JAN_SESSION_REFRESH_SECONDS."""
        if interval is None:
            interval = get_config().session_refresh_seconds
        return SessionRefresher(
            self.session, current_path, interval=interval, is_visible=is_visible
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Console":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


__all__ = [
    "ApiKeysService",
    "AuditLogsService",
    "Console",
    "ConsoleClient",
    "InvitesService",
    "MembersService",
    "OverviewService",
    "ProjectsService",
    "ProvidersService",
    "QueryCache",
    "ResourceService",
    "ServiceError",
    "SessionRefresher",
    "SessionService",
    "SettingsService",
]
