"""Audit log shapes."""

from __future__ import annotations

from typing import Any, Literal, Optional

from jan_admin.schemas.common import ListEnvelope, UpstreamModel


class AuditLog(UpstreamModel):
    object: Literal["organization.audit_log"]
    id: int
    event: str
    user_email: Optional[str] = None
    metadata: dict[str, Any]
    created_at: str


class AuditLogList(ListEnvelope):
    object: Literal["list"]
    data: list[AuditLog]
    total: int
