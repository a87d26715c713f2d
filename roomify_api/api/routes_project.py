# File: roomify_api/api/routes_project.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from roomify_api.api.deps import get_db, get_identity
from roomify_api.core.errors import ErrorKind, ProjectError, authentication_failed
from roomify_api.schemas.project import (
    ProjectIdRequest,
    ProjectListResponse,
    ProjectResponse,
    SaveProjectRequest,
    SaveProjectResponse,
    ShareProjectResponse,
    UnshareProjectResponse,
    Validation,
    validate_project_id,
    validate_save,
)
from roomify_api.services.identity import Identity
from roomify_api.services.project_store import Namespace, ProjectStore
from roomify_api.services.visibility import private_record, share_project, unshare_project

logger = logging.getLogger(__name__)

router = APIRouter()


def _bad_request(message: str, validation: Validation) -> ProjectError:
    return ProjectError(
        ErrorKind.BAD_REQUEST,
        message,
        message=f"Missing fields: {', '.join(validation.missing)}",
    )


def _require_identity(identity: Optional[Identity]) -> Identity:
    if identity is None:
        raise authentication_failed()
    return identity


@router.post("/save", response_model=SaveProjectResponse, summary="Save a private project")
def save_project(
    req: SaveProjectRequest,
    db: Session = Depends(get_db),
    identity: Optional[Identity] = Depends(get_identity),
):
    try:
        validation = validate_save(req)
        if not validation.valid:
            raise _bad_request("Project ID and source image are required", validation)
        caller = _require_identity(identity)

        project = private_record(req.project.model_dump())
        store = ProjectStore.for_user(db, caller.user_id)
        payload = store.save(Namespace.PRIVATE, project["id"], project)

        return SaveProjectResponse(id=project["id"], project=payload)
    except ProjectError:
        raise
    except Exception as e:
        logger.exception("Saving project failed")
        raise ProjectError.internal("Failed to save project", e)


@router.get("/list", response_model=ProjectListResponse, summary="List public projects")
def list_projects(
    db: Session = Depends(get_db),
    identity: Optional[Identity] = Depends(get_identity),
):
    try:
        caller = _require_identity(identity)
        store = ProjectStore.for_user(db, caller.user_id)
        return ProjectListResponse(projects=store.list_all(Namespace.PUBLIC))
    except ProjectError:
        raise
    except Exception as e:
        logger.exception("Listing projects failed")
        raise ProjectError.internal("Failed to list projects", e)


@router.get("/get", response_model=ProjectResponse, summary="Get a private project")
def get_project(
    id: Optional[str] = None,
    db: Session = Depends(get_db),
    identity: Optional[Identity] = Depends(get_identity),
):
    try:
        validation = validate_project_id(id, name="id")
        if not validation.valid:
            raise _bad_request("Project ID is required", validation)
        caller = _require_identity(identity)

        store = ProjectStore.for_user(db, caller.user_id)
        project = store.load(Namespace.PRIVATE, id)
        if project is None:
            raise ProjectError(ErrorKind.NOT_FOUND, "Project not found")

        return ProjectResponse(project=project)
    except ProjectError:
        raise
    except Exception as e:
        logger.exception("Loading project %s failed", id)
        raise ProjectError.internal("Failed to get project", e)


@router.post("/share", response_model=ShareProjectResponse, summary="Make a project public")
def share(
    req: ProjectIdRequest,
    db: Session = Depends(get_db),
    identity: Optional[Identity] = Depends(get_identity),
):
    try:
        validation = validate_project_id(req.projectId)
        if not validation.valid:
            raise _bad_request("Project ID is required", validation)
        caller = _require_identity(identity)

        store = ProjectStore.for_user(db, caller.user_id)
        project = share_project(store, req.projectId, caller)

        return ShareProjectResponse(projectId=req.projectId, project=project)
    except ProjectError:
        raise
    except Exception as e:
        logger.exception("Sharing project %s failed", req.projectId)
        raise ProjectError.internal("Failed to share project", e)


@router.post("/unshare", response_model=UnshareProjectResponse, summary="Make a project private again")
def unshare(
    req: ProjectIdRequest,
    db: Session = Depends(get_db),
    identity: Optional[Identity] = Depends(get_identity),
):
    try:
        validation = validate_project_id(req.projectId)
        if not validation.valid:
            raise _bad_request("Project ID is required", validation)
        caller = _require_identity(identity)

        store = ProjectStore.for_user(db, caller.user_id)
        project = unshare_project(store, req.projectId, caller)

        return UnshareProjectResponse(projectId=req.projectId, project=project)
    except ProjectError:
        raise
    except Exception as e:
        logger.exception("Unsharing project %s failed", req.projectId)
        raise ProjectError.internal("Failed to unshare project", e)
