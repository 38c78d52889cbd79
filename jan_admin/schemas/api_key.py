"""Admin API key shapes."""

from __future__ import annotations

from typing import Literal, Optional

from jan_admin.schemas.common import ListEnvelope, UpstreamModel


class ApiKeyOwner(UpstreamModel):
    id: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None


class AdminApiKey(UpstreamModel):
    object: str
    id: str
    name: Optional[str] = None
    redacted_value: Optional[str] = None
    created_at: float
    last_used_at: Optional[float] = None
    owner: Optional[ApiKeyOwner] = None
    # Only present in the create response
    value: Optional[str] = None


class AdminApiKeyList(ListEnvelope):
    object: Literal["list"]
    data: list[AdminApiKey]
