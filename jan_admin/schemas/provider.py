"""Model provider shapes."""

from __future__ import annotations

from typing import Literal, Optional

from jan_admin.schemas.common import ListEnvelope, UpstreamModel


class Provider(UpstreamModel):
    id: str
    slug: str
    name: str
    vendor: str
    base_url: Optional[str] = None
    active: bool
    metadata: Optional[dict[str, str]] = None
    scope: str
    project_id: Optional[str] = None
    last_synced_at: Optional[float] = None
    sync_latency_ms: Optional[float] = None
    api_key_hint: Optional[str] = None
    models_count: int = 0


class ProviderList(ListEnvelope):
    object: Literal["list"]
    data: list[Provider]


class ProviderVendor(UpstreamModel):
    key: str
    name: str
    scope: str
    default_base_url: Optional[str] = None
    credential_hint: Optional[str] = None


class ProviderVendorList(ListEnvelope):
    object: Literal["list"]
    data: list[ProviderVendor]
