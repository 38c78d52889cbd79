"""Organization overview and member shapes."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

from jan_admin.schemas.common import ListEnvelope, UpstreamModel


class ProjectCounts(BaseModel):
    total: int
    active: int
    archived: int


class MemberCounts(BaseModel):
    total: int


class InviteCounts(BaseModel):
    pending: int


class ProviderCounts(BaseModel):
    active: int
    inactive: int


class OrganizationOverview(UpstreamModel):
    object: Literal["organization.overview"]
    projects: ProjectCounts
    members: MemberCounts
    invites: InviteCounts
    providers: ProviderCounts


class MemberUser(UpstreamModel):
    id: str
    name: str
    email: str
    created_at: float


class OrganizationMember(UpstreamModel):
    object: Literal["organization.member"]
    role: str
    joined_at: float
    user: MemberUser


class OrganizationMemberList(ListEnvelope):
    object: Literal["list"]
    data: list[OrganizationMember]
    total: int


class AdminSession(UpstreamModel):
    """Identity returned by /v1/auth/me."""

    object: str
    id: str
    email: str
    name: Optional[str] = None
