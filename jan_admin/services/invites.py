"""Organization invites service."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from jan_admin.schemas.invite import CreateInviteInput, Invite, InviteList
from jan_admin.services.base import ResourceService, validate_input

INVITES_PATH = "/api/jan/organization/invites"


class InvitesService(ResourceService):
    resource = "invites"

    async def list(self) -> InviteList:
        return await self._read(
            INVITES_PATH,
            InviteList,
            failure="Failed to load invites",
        )

    async def create(
        self,
        email: str,
        role: str,
        projects: Optional[Sequence[dict[str, str]]] = None,
    ) -> Invite:
        """Invite someone; the payload is checked before it is sent."""
        payload = validate_input(
            CreateInviteInput,
            {"email": email, "role": role, "projects": list(projects or [])},
        )
        return await self._write(
            "POST",
            INVITES_PATH,
            json_body=payload.model_dump(),
            model=Invite,
            failure="Failed to create invite",
            invalidates=("organization-overview",),
        )

    async def delete(self, invite_id: str) -> Any:
        return await self._write(
            "DELETE",
            f"{INVITES_PATH}/{invite_id}",
            failure="Failed to delete invite",
            invalidates=("organization-overview",),
        )
