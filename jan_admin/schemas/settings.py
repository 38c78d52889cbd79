"""Organization settings shapes."""

from __future__ import annotations

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from jan_admin.schemas.common import UpstreamModel, checked_email

SenderEmail = Annotated[EmailStr, checked_email("Invalid email")]


class SmtpSettings(UpstreamModel):
    object: Literal["organization.smtp_settings"]
    enabled: bool
    host: str
    port: int
    username: str
    from_email: SenderEmail
    has_password: bool = False


class SmtpSettingsInput(BaseModel):
    enabled: bool
    host: str
    port: int = Field(..., ge=1, le=65535)
    username: str
    from_email: SenderEmail
    # Left out of the request when not given, so the stored password is kept
    password: Optional[str] = None


class WorkspaceQuotaOverride(BaseModel):
    user_public_id: str
    limit: int = Field(..., gt=0)


class WorkspaceQuota(UpstreamModel):
    object: Literal["organization.workspace_quota"]
    default_limit: int = Field(..., gt=0)
    overrides: list[WorkspaceQuotaOverride]
