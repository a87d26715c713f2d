# File: roomify_api/schemas/project.py

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ProjectPayload(BaseModel):
    """A project as sent by the client; unknown fields pass through untouched."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    sourceImage: Optional[Any] = None


class SaveProjectRequest(BaseModel):
    project: Optional[ProjectPayload] = None


class ProjectIdRequest(BaseModel):
    projectId: Optional[str] = None


@dataclass(frozen=True)
class Validation:
    valid: bool
    missing: list[str] = field(default_factory=list)


def _present(value: Any) -> bool:
    return value is not None and value != ""


def validate_save(req: SaveProjectRequest) -> Validation:
    project = req.project
    missing = [
        name
        for name in ("id", "sourceImage")
        if project is None or not _present(getattr(project, name))
    ]
    return Validation(valid=not missing, missing=missing)


def validate_project_id(project_id: Optional[str], name: str = "projectId") -> Validation:
    if _present(project_id):
        return Validation(valid=True)
    return Validation(valid=False, missing=[name])


class SaveProjectResponse(BaseModel):
    saved: bool = True
    id: str
    project: dict[str, Any]


class ProjectListResponse(BaseModel):
    projects: list[dict[str, Any]]


class ProjectResponse(BaseModel):
    project: dict[str, Any]


class ShareProjectResponse(BaseModel):
    shared: bool = True
    projectId: str
    project: dict[str, Any]


class UnshareProjectResponse(BaseModel):
    unshared: bool = True
    projectId: str
    project: dict[str, Any]
