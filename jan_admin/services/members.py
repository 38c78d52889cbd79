"""Organization members service."""

from __future__ import annotations

from typing import Any, Literal

from jan_admin.schemas.organization import OrganizationMemberList
from jan_admin.services.base import ResourceService, ServiceError

MEMBERS_PATH = "/api/jan/organization/members"

MEMBER_ROLES = ("owner", "reader")


class MembersService(ResourceService):
    resource = "members"

    async def list(self) -> OrganizationMemberList:
        return await self._read(
            MEMBERS_PATH,
            OrganizationMemberList,
            failure="Failed to load organization members",
        )

    async def update_role(
        self, user_public_id: str, role: Literal["owner", "reader"]
    ) -> Any:
        if role not in MEMBER_ROLES:
            raise ServiceError(f"Unknown member role: {role}", status_code=400)
        return await self._write(
            "PATCH",
            f"{MEMBERS_PATH}/{user_public_id}",
            json_body={"role": role},
            failure="Failed to update member role",
        )
