"""Organization overview service."""

from __future__ import annotations

from jan_admin.schemas.organization import OrganizationOverview
from jan_admin.services.base import ResourceService


class OverviewService(ResourceService):
    resource = "organization-overview"

    async def get(self) -> OrganizationOverview:
        return await self._read(
            "/api/jan/organization/overview",
            OrganizationOverview,
            failure="Failed to load organization overview",
        )
