"""Audit logs service."""

from __future__ import annotations

from typing import Optional

from jan_admin.schemas.audit_log import AuditLogList
from jan_admin.services.base import ResourceService


class AuditLogsService(ResourceService):
    resource = "audit-logs"

    async def list(
        self, limit: Optional[int] = None, after: Optional[str] = None
    ) -> AuditLogList:
        """One page of audit logs; pass the previous page's last_id as after."""
        params = {"limit": str(limit) if limit else None, "after": after or None}
        return await self._read(
            "/api/jan/organization/audit-logs",
            AuditLogList,
            params=params,
            failure="Failed to load audit logs",
        )
