"""Project shapes."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from jan_admin.schemas.common import ListEnvelope, UpstreamModel


class Project(UpstreamModel):
    object: Literal["project"]
    id: str
    name: str
    created_at: float
    archived_at: Optional[float] = None
    status: str


class ProjectList(ListEnvelope):
    object: Literal["list"]
    data: list[Project]
    has_more: bool


class ProjectNameInput(UpstreamModel):
    """Name sent on create and rename; surrounding whitespace is dropped."""

    name: str = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise PydanticCustomError("name_required", "Project name is required")
        return v
