"""Projects service."""

from __future__ import annotations

from typing import Any

from jan_admin.schemas.project import ProjectList, ProjectNameInput
from jan_admin.services.base import ResourceService, validate_input

PROJECTS_PATH = "/api/jan/organization/projects"


class ProjectsService(ResourceService):
    resource = "projects"

    async def list(self, include_archived: bool = False) -> ProjectList:
        params = {"include_archived": "true"} if include_archived else None
        return await self._read(
            PROJECTS_PATH,
            ProjectList,
            params=params,
            failure="Failed to load projects",
        )

    async def create(self, name: str) -> Any:
        payload = validate_input(ProjectNameInput, {"name": name})
        return await self._write(
            "POST",
            PROJECTS_PATH,
            json_body=payload.model_dump(),
            failure="Failed to create project",
            invalidates=("organization-overview",),
        )

    async def rename(self, project_id: str, name: str) -> Any:
        payload = validate_input(ProjectNameInput, {"name": name})
        return await self._write(
            "POST",
            f"{PROJECTS_PATH}/{project_id}",
            json_body=payload.model_dump(),
            failure="Failed to update project",
        )

    async def archive(self, project_id: str) -> Any:
        return await self._write(
            "POST",
            f"{PROJECTS_PATH}/{project_id}/archive",
            failure="Failed to archive project",
            invalidates=("organization-overview",),
        )
