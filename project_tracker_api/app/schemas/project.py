"""
Pydantic models for project data.

Python attributes use snake_case while the wire format uses the
camelCase names clients already rely on (``clientName``,
``startDate``...).  Models accept either spelling on input and are
serialised by alias.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ProjectStatus(str, Enum):
    """Lifecycle states of a project.  ``completed`` is terminal."""

    ACTIVE = "active"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"


STATUS_VALUES = [s.value for s in ProjectStatus]
SORT_FIELDS = ["createdAt", "startDate"]
SORT_ORDERS = ["asc", "desc"]
DEFAULT_SORT = "createdAt"
DEFAULT_ORDER = "desc"


class ProjectRead(BaseModel):
    """Schema for a project record as returned by the store and the API."""

    id: str
    name: str
    client_name: str = Field(..., alias="clientName")
    status: ProjectStatus = ProjectStatus.ACTIVE
    start_date: str = Field(..., alias="startDate", examples=["2026-01-15"])
    end_date: Optional[str] = Field(None, alias="endDate")
    is_deleted: bool = Field(False, alias="isDeleted")
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")

    model_config = {
        "populate_by_name": True,
    }


class ProjectEnvelope(BaseModel):
    data: ProjectRead


class ProjectListEnvelope(BaseModel):
    data: List[ProjectRead]


class ErrorBody(BaseModel):
    code: str = Field(..., examples=["VALIDATION_ERROR"])
    message: str


class ErrorEnvelope(BaseModel):
    """Shape of every error response: ``{"error": {"code", "message"}}``."""

    error: ErrorBody
