"""
Project endpoints for API v1.

Each handler extracts data from the request (path, query, body),
delegates to :class:`ProjectService` and wraps the result in the
``{"data": ...}`` envelope.  Errors raised by the service propagate to
the handlers registered in ``api/errors.py``; nothing is caught here.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from project_tracker_api.app.schemas.project import (
    ErrorEnvelope,
    ProjectEnvelope,
    ProjectListEnvelope,
)
from project_tracker_api.app.services.project_service import ProjectService

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorEnvelope},
    404: {"model": ErrorEnvelope},
}


def get_project_service(request: Request) -> ProjectService:
    """Return the service bound to the running application."""
    return request.app.state.project_service


@router.post(
    "",
    response_model=ProjectEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={400: _ERRORS[400]},
)
async def create_project(
    body: Any = Body(None),
    service: ProjectService = Depends(get_project_service),
) -> ProjectEnvelope:
    """Create a project.

    The body must contain ``name``, ``clientName`` and ``startDate``;
    ``status`` defaults to ``active`` and ``endDate`` is optional.  All
    validation problems are reported together in one message.
    """
    project = await service.create_project(body)
    return ProjectEnvelope(data=project)


@router.get("", response_model=ProjectListEnvelope, responses={400: _ERRORS[400]})
async def list_projects(
    status_filter: Optional[str] = Query(None, alias="status"),
    search: Optional[str] = Query(None, description="Case-insensitive match on name or clientName"),
    sort: Optional[str] = Query(None, description="createdAt (default) or startDate"),
    order: Optional[str] = Query(None, description="asc or desc (default)"),
    service: ProjectService = Depends(get_project_service),
) -> ProjectListEnvelope:
    """List non-deleted projects.

    - **status**: only projects in this status.
    - **search**: substring of the project or client name.
    - **sort** / **order**: ordering of the result.
    """
    projects = await service.list_projects(
        {"status": status_filter, "search": search, "sort": sort, "order": order}
    )
    return ProjectListEnvelope(data=projects)


@router.get("/{project_id}", response_model=ProjectEnvelope, responses={404: _ERRORS[404]})
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectEnvelope:
    """Retrieve a single project.  Soft-deleted projects answer 404."""
    project = await service.get_project(project_id)
    return ProjectEnvelope(data=project)


@router.patch("/{project_id}/status", response_model=ProjectEnvelope, responses=_ERRORS)
async def update_project_status(
    project_id: str,
    body: Any = Body(None),
    service: ProjectService = Depends(get_project_service),
) -> ProjectEnvelope:
    """Change a project's status.

    Allowed: ``active -> on_hold|completed``, ``on_hold -> active|completed``.
    ``completed`` is terminal.  Sending the current status is a no-op.
    """
    project = await service.update_project_status(project_id, body)
    return ProjectEnvelope(data=project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: _ERRORS[404]},
)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> Response:
    """Soft-delete a project.  Responds with HTTP 204 No Content."""
    await service.delete_project(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
