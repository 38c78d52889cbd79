"""Organization invite shapes."""

from __future__ import annotations

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from jan_admin.schemas.common import ListEnvelope, UpstreamModel, checked_email


class InviteProject(UpstreamModel):
    id: str
    role: str


class Invite(UpstreamModel):
    object: Literal["organization.invite"]
    id: str
    email: str
    role: str
    status: str
    invited_at: str
    expires_at: str
    accepted_at: Optional[str] = None
    projects: list[InviteProject]


class InviteList(ListEnvelope):
    object: Literal["list"]
    data: list[Invite]
    total: int


class InviteProjectInput(BaseModel):
    id: str
    role: Literal["owner", "member"]


class CreateInviteInput(BaseModel):
    email: Annotated[EmailStr, checked_email("Invalid email")]
    role: Literal["owner", "reader"]
    projects: list[InviteProjectInput] = Field(default_factory=list)
