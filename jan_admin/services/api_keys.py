"""Admin API keys service."""

from __future__ import annotations

from typing import Any

from jan_admin.schemas.api_key import AdminApiKey, AdminApiKeyList
from jan_admin.services.base import ResourceService

API_KEYS_PATH = "/api/jan/organization/admin-api-keys"


class ApiKeysService(ResourceService):
    resource = "admin-api-keys"

    async def list(self) -> AdminApiKeyList:
        return await self._read(
            API_KEYS_PATH,
            AdminApiKeyList,
            failure="Failed to load API keys",
        )

    async def create(self, name: str) -> AdminApiKey:
        """Create a key. The plain value is only in this response."""
        return await self._write(
            "POST",
            API_KEYS_PATH,
            json_body={"name": name},
            model=AdminApiKey,
            failure="Failed to create API key",
        )

    async def delete(self, key_id: str) -> Any:
        return await self._write(
            "DELETE",
            f"{API_KEYS_PATH}/{key_id}",
            failure="Failed to delete API key",
        )
