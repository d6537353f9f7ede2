"""
Business logic for projects.

``ProjectService`` sits between the HTTP layer and the data store.  It
orchestrates validation, enforces the status lifecycle and decides what
soft delete means.  It never builds responses (that is the router's
job) and never mutates records directly (that is the store's job).

Status lifecycle::

    active    -> on_hold | completed
    on_hold   -> active  | completed
    completed -> (terminal)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from project_tracker_api.app.core.errors import InvalidTransition, NotFound, ValidationFailure
from project_tracker_api.app.data.project_store import ProjectStore
from project_tracker_api.app.schemas.project import (
    SORT_FIELDS,
    STATUS_VALUES,
    ProjectRead,
    ProjectStatus,
)
from project_tracker_api.app.validators.project_validator import (
    validate_create_project,
    validate_status_update,
)

logger = logging.getLogger(__name__)

# Explicit allowlist: current status -> statuses it may move to.
ALLOWED_TRANSITIONS: Dict[ProjectStatus, FrozenSet[ProjectStatus]] = {
    ProjectStatus.ACTIVE: frozenset({ProjectStatus.ON_HOLD, ProjectStatus.COMPLETED}),
    ProjectStatus.ON_HOLD: frozenset({ProjectStatus.ACTIVE, ProjectStatus.COMPLETED}),
    ProjectStatus.COMPLETED: frozenset(),
}


def can_transition(current: ProjectStatus, requested: ProjectStatus) -> bool:
    """Return True if ``current -> requested`` is in the allowlist.

    Staying in the same status is not a transition and returns False;
    the service treats that case as a no-op before asking.
    """
    return requested in ALLOWED_TRANSITIONS.get(ProjectStatus(current), frozenset())


class ProjectService:
    """Service for creating, listing, updating and soft‑deleting projects."""

    def __init__(self, store: ProjectStore) -> None:
        self.store = store

    async def create_project(self, body: Any) -> ProjectRead:
        """Validate ``body`` and insert a new project.

        Raises
        ------
        ValidationFailure
            Listing every violated rule of the payload.
        """
        data = validate_create_project(body)
        project = await self.store.create(data)
        logger.info("Created project %s (%s)", project.id, project.name)
        return project

    async def list_projects(self, query: Optional[Mapping[str, Any]] = None) -> List[ProjectRead]:
        """List non‑deleted projects with optional filters and sorting.

        ``query`` may carry ``status``, ``search``, ``sort`` and
        ``order``.  Empty values are ignored.  An unrecognised
        ``status``, ``sort`` or ``order`` raises ``ValidationFailure``
        naming the parameter and its allowed values.
        """
        query = query or {}
        status = query.get("status") or None
        search = query.get("search") or None
        sort = query.get("sort") or None
        order = query.get("order") or None

        if status and status not in STATUS_VALUES:
            raise ValidationFailure(
                f"Invalid status filter: {status}. Must be one of: {', '.join(STATUS_VALUES)}"
            )
        if sort and sort not in SORT_FIELDS:
            raise ValidationFailure(
                f"Invalid sort field: {sort}. Must be one of: {', '.join(SORT_FIELDS)}"
            )
        if order and order not in ("asc", "desc"):
            raise ValidationFailure(f"Invalid order: {order}. Must be 'asc' or 'desc'")

        return await self.store.find_all(status=status, search=search, sort=sort, order=order)

    async def get_project(self, project_id: str) -> ProjectRead:
        """Return a visible project.

        Missing and soft‑deleted projects are indistinguishable: both
        raise ``NotFound``.
        """
        project = await self.store.find_by_id(project_id)
        if project is None or project.is_deleted:
            raise NotFound(project_id)
        return project

    async def update_project_status(self, project_id: str, body: Any) -> ProjectRead:
        """Move a project to the status given in ``body``.

        Requesting the current status again returns the record
        unchanged (``updated_at`` is not bumped).

        Raises
        ------
        ValidationFailure
            If ``body`` has no valid status.
        NotFound
            If the project is missing or soft‑deleted.
        InvalidTransition
            If the lifecycle does not allow the change.
        """
        new_status = validate_status_update(body)
        project = await self.get_project(project_id)
        current = project.status

        if current == new_status:
            return project

        if not can_transition(current, new_status):
            raise InvalidTransition(current.value, new_status.value)

        updated = await self.store.update(project_id, {"status": new_status})
        if updated is None:
            raise NotFound(project_id)
        logger.info(
            "Project %s status changed from %s to %s",
            project_id,
            current.value,
            new_status.value,
        )
        return updated

    async def delete_project(self, project_id: str) -> None:
        """Soft‑delete a project.

        The record stays in the store with ``is_deleted`` set and
        disappears from listings and lookups.  Deleting a missing or
        already deleted project raises ``NotFound``.
        """
        await self.get_project(project_id)
        await self.store.update(project_id, {"is_deleted": True})
        logger.info("Soft-deleted project %s", project_id)
