"""Model providers service."""

from __future__ import annotations

from typing import Any, Optional

from jan_admin.schemas.provider import ProviderList, ProviderVendorList
from jan_admin.services.base import ResourceService

ORG_PROVIDERS_PATH = "/api/jan/organization/models/providers"


class ProvidersService(ResourceService):
    resource = "providers"

    async def list(self) -> ProviderList:
        return await self._read(
            "/api/jan/models/providers",
            ProviderList,
            failure="Failed to load providers",
        )

    async def vendors(self) -> ProviderVendorList:
        return await self._read(
            "/api/jan/organization/providers/vendors",
            ProviderVendorList,
            failure="Failed to load provider vendors",
            resource="provider-vendors",
        )

    async def create(
        self,
        name: str,
        vendor: str,
        base_url: str,
        api_key: Optional[str] = None,
        project_public_id: Optional[str] = None,
    ) -> Any:
        payload: dict[str, Any] = {
            "name": name,
            "vendor": vendor,
            "base_url": base_url,
        }
        if api_key is not None:
            payload["api_key"] = api_key
        if project_public_id is not None:
            payload["project_public_id"] = project_public_id
        return await self._write(
            "POST",
            ORG_PROVIDERS_PATH,
            json_body=payload,
            failure="Failed to create provider",
            invalidates=("organization-overview",),
        )

    async def update(
        self,
        provider_id: str,
        *,
        name: Optional[str] = None,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> Any:
        fields = {
            "name": name,
            "base_url": base_url,
            "api_key": api_key,
            "active": active,
        }
        return await self._write(
            "PATCH",
            f"{ORG_PROVIDERS_PATH}/{provider_id}",
            json_body={k: v for k, v in fields.items() if v is not None},
            failure="Failed to update provider",
            invalidates=("organization-overview",),
        )

    async def sync(self, provider_id: str) -> Any:
        return await self._write(
            "POST",
            f"{ORG_PROVIDERS_PATH}/{provider_id}/sync",
            failure="Failed to sync provider models",
        )
