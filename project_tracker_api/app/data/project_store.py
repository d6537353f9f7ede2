"""
In‑memory data store for projects.

All reads and writes go through :class:`ProjectStore` methods; the
internal list is never handed out.  Every method returns a fresh
:class:`ProjectRead` built from a copy of the stored record, so callers
cannot mutate store state.  Methods are coroutines to match the call
pattern of a database‑backed store; none of them awaits internally, so
each call is atomic with respect to other coroutines.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from project_tracker_api.app.schemas.project import (
    DEFAULT_ORDER,
    DEFAULT_SORT,
    ProjectRead,
    ProjectStatus,
)

# Wire sort field -> record key.
_SORT_KEYS = {
    "createdAt": "created_at",
    "startDate": "start_date",
}


def utc_now_iso() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class ProjectStore:
    """Owns the canonical set of project records.  No business rules."""

    def __init__(self) -> None:
        self._projects: List[Dict[str, Any]] = []

    @staticmethod
    def _to_model(record: Dict[str, Any]) -> ProjectRead:
        return ProjectRead(**dict(record))

    def _index_of(self, project_id: str) -> int:
        for index, record in enumerate(self._projects):
            if record["id"] == project_id:
                return index
        return -1

    async def create(self, data: Dict[str, Any]) -> ProjectRead:
        """Insert a new project.

        Assigns ``id``, ``created_at``, ``updated_at`` and ``is_deleted``.

        Parameters
        ----------
        data : Dict[str, Any]
            Validated fields (``name``, ``client_name``, ``status``,
            ``start_date``, ``end_date``).
        """
        now = utc_now_iso()
        record = {
            "id": str(uuid.uuid4()),
            "name": data["name"],
            "client_name": data["client_name"],
            "status": ProjectStatus(data.get("status") or ProjectStatus.ACTIVE),
            "start_date": data["start_date"],
            "end_date": data.get("end_date") or None,
            "is_deleted": False,
            "created_at": now,
            "updated_at": now,
        }
        self._projects.append(record)
        return self._to_model(record)

    async def find_by_id(self, project_id: str) -> Optional[ProjectRead]:
        """Return the project with ``project_id`` or ``None``.

        Soft‑deleted records are returned too; visibility is the
        caller's decision.
        """
        index = self._index_of(project_id)
        if index == -1:
            return None
        return self._to_model(self._projects[index])

    async def find_all(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[ProjectRead]:
        """Return non‑deleted projects matching every given filter.

        - ``status``: exact status match.
        - ``search``: case‑insensitive substring of ``name`` or ``client_name``.
        - ``sort``: ``createdAt`` or ``startDate``; anything else sorts by
          ``createdAt``.
        - ``order``: ``asc`` or anything else for descending.

        Values are compared as strings.  The sort is stable, so records
        with equal keys keep their insertion order.
        """
        result = [p for p in self._projects if not p["is_deleted"]]

        if status:
            result = [p for p in result if p["status"] == status]

        if search:
            term = search.lower()
            result = [
                p
                for p in result
                if term in p["name"].lower() or term in p["client_name"].lower()
            ]

        key = _SORT_KEYS.get(sort or DEFAULT_SORT, _SORT_KEYS[DEFAULT_SORT])
        descending = (order or DEFAULT_ORDER) != "asc"
        result = sorted(result, key=lambda p: p[key] or "", reverse=descending)

        return [self._to_model(p) for p in result]

    async def update(self, project_id: str, updates: Dict[str, Any]) -> Optional[ProjectRead]:
        """Merge ``updates`` into the project and bump ``updated_at``.

        Only the given keys change.  Returns ``None`` if the id is unknown.
        """
        index = self._index_of(project_id)
        if index == -1:
            return None
        record = {**self._projects[index], **updates, "updated_at": utc_now_iso()}
        self._projects[index] = record
        return self._to_model(record)

    async def clear(self) -> None:
        """Drop every record.  Reset hook for tests."""
        self._projects = []
