# File: roomify_api/services/visibility.py

"""
Project visibility transitions.

A project is either Private (stored under the private namespace, no sharing
metadata) or Public (stored under the public namespace with ``ownerId``,
``sharedBy``, ``sharedAt`` and ``isPublic: true``). Share and unshare are
the only ways between the two.

Both transitions write the target record before deleting the source one.
The store has no multi-key atomicity, so an interruption between the two
steps leaves the project in both namespaces rather than in neither.
"""

import logging
from typing import Optional

from roomify_api.core.errors import ErrorKind, ProjectError, authentication_failed
from roomify_api.services.identity import Identity
from roomify_api.services.project_store import (
    Namespace,
    Project,
    ProjectStore,
    utc_now_iso,
)

logger = logging.getLogger(__name__)

# present only while a project is public
SHARING_FIELDS = ("ownerId", "sharedBy", "sharedAt")


def private_record(project: Project) -> Project:
    """
    Copy of ``project`` fit for the private namespace.

    Sharing metadata is dropped and a true ``isPublic`` becomes false; a
    missing or false ``isPublic`` is left as it is.
    """
    record = {k: v for k, v in project.items() if k not in SHARING_FIELDS}
    if record.get("isPublic"):
        record["isPublic"] = False
    return record


def share_project(
    store: ProjectStore, project_id: str, caller: Optional[Identity]
) -> Project:
    """Private -> Public. Returns the public record."""
    project = store.load(Namespace.PRIVATE, project_id)
    if project is None:
        raise ProjectError(ErrorKind.NOT_FOUND, "Project not found")
    if caller is None:
        raise authentication_failed()

    # public ids share one scope; never replace somebody else's shared project
    existing = store.load(Namespace.PUBLIC, project_id)
    if existing is not None and existing.get("ownerId") != caller.user_id:
        logger.warning(
            "Share of project %s refused for %s (already shared by %s)",
            project_id,
            caller.user_id,
            existing.get("ownerId"),
        )
        raise ProjectError(
            ErrorKind.FORBIDDEN, "A project with this ID is already shared by another user"
        )

    public_project = {
        **project,
        "ownerId": caller.user_id,
        "sharedBy": caller.display_name,
        "sharedAt": utc_now_iso(),
        "isPublic": True,
    }

    public_project = store.save(Namespace.PUBLIC, project_id, public_project)
    store.remove(Namespace.PRIVATE, project_id)

    logger.info("Project %s shared by %s", project_id, caller.user_id)
    return public_project


def unshare_project(
    store: ProjectStore, project_id: str, caller: Optional[Identity]
) -> Project:
    """Public -> Private. Only the owner recorded at share time may do this."""
    project = store.load(Namespace.PUBLIC, project_id)
    if project is None:
        raise ProjectError(ErrorKind.NOT_FOUND, "Project not found in public storage")
    if caller is None:
        raise authentication_failed()

    if project.get("ownerId") != caller.user_id:
        logger.warning(
            "Unshare of project %s refused for %s (owner %s)",
            project_id,
            caller.user_id,
            project.get("ownerId"),
        )
        raise ProjectError(ErrorKind.FORBIDDEN, "Not authorized to unshare this project")

    private_project = store.save(
        Namespace.PRIVATE, project_id, {**private_record(project), "isPublic": False}
    )
    store.remove(Namespace.PUBLIC, project_id)

    logger.info("Project %s unshared by %s", project_id, caller.user_id)
    return private_project
