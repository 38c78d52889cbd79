"""Schema-validated shapes of the Jan API resources."""

from jan_admin.schemas.api_key import AdminApiKey, AdminApiKeyList
from jan_admin.schemas.audit_log import AuditLog, AuditLogList
from jan_admin.schemas.invite import CreateInviteInput, Invite, InviteList
from jan_admin.schemas.organization import (
    AdminSession,
    OrganizationMember,
    OrganizationMemberList,
    OrganizationOverview,
)
from jan_admin.schemas.project import Project, ProjectList, ProjectNameInput
from jan_admin.schemas.provider import (
    Provider,
    ProviderList,
    ProviderVendor,
    ProviderVendorList,
)
from jan_admin.schemas.settings import (
    SmtpSettings,
    SmtpSettingsInput,
    WorkspaceQuota,
    WorkspaceQuotaOverride,
)

__all__ = [
    "AdminApiKey",
    "AdminApiKeyList",
    "AdminSession",
    "AuditLog",
    "AuditLogList",
    "CreateInviteInput",
    "Invite",
    "InviteList",
    "OrganizationMember",
    "OrganizationMemberList",
    "OrganizationOverview",
    "Project",
    "ProjectList",
    "ProjectNameInput",
    "Provider",
    "ProviderList",
    "ProviderVendor",
    "ProviderVendorList",
    "SmtpSettings",
    "SmtpSettingsInput",
    "WorkspaceQuota",
    "WorkspaceQuotaOverride",
]
