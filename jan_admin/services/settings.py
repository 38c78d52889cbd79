"""Organization settings service (SMTP and workspace quotas)."""

from __future__ import annotations

from typing import Optional

from jan_admin.schemas.settings import (
    SmtpSettings,
    SmtpSettingsInput,
    WorkspaceQuota,
)
from jan_admin.services.base import ResourceService, validate_input

SMTP_PATH = "/api/jan/organization/settings/smtp"
WORKSPACE_QUOTAS_PATH = "/api/jan/organization/settings/workspace-quotas"


class SettingsService(ResourceService):
    resource = "smtp-settings"

    async def smtp(self) -> SmtpSettings:
        return await self._read(
            SMTP_PATH,
            SmtpSettings,
            failure="Failed to load SMTP settings",
        )

    async def update_smtp(
        self,
        *,
        enabled: bool,
        host: str,
        port: int,
        username: str,
        from_email: str,
        password: Optional[str] = None,
    ) -> SmtpSettings:
        payload = validate_input(
            SmtpSettingsInput,
            {
                "enabled": enabled,
                "host": host,
                "port": port,
                "username": username,
                "from_email": from_email,
                "password": password,
            },
        )
        return await self._write(
            "PUT",
            SMTP_PATH,
            json_body=payload.model_dump(exclude_none=True),
            model=SmtpSettings,
            failure="Failed to update SMTP settings",
        )

    async def workspace_quota(self) -> WorkspaceQuota:
        return await self._read(
            WORKSPACE_QUOTAS_PATH,
            WorkspaceQuota,
            failure="Failed to load workspace quotas",
            resource="workspace-quota",
        )

    async def update_workspace_quota(self, quota: WorkspaceQuota) -> WorkspaceQuota:
        body = {
            "default_limit": quota.default_limit,
            "overrides": [o.model_dump() for o in quota.overrides],
        }
        return await self._write(
            "PUT",
            WORKSPACE_QUOTAS_PATH,
            json_body=body,
            model=WorkspaceQuota,
            failure="Failed to update workspace quotas",
            resource="workspace-quota",
        )
