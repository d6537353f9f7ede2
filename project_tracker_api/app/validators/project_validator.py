"""
Project payload validation.

Pure functions that return sanitized data or raise
:class:`~project_tracker_api.app.core.errors.ValidationFailure`.
Creation payloads are checked against every rule before failing so a
client sees all problems in one response; status updates have a single
rule.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from project_tracker_api.app.core.errors import ValidationFailure
from project_tracker_api.app.schemas.project import STATUS_VALUES, ProjectStatus


def validate_create_project(body: Any) -> Dict[str, Any]:
    """Validate the body of a create request.

    Rules enforced:

    * ``name`` is a non-empty string
    * ``clientName`` is a non-empty string
    * ``status`` (if present, even ``null``) is one of the allowed values,
      else ``active``
    * ``startDate`` is a valid ISO date string
    * ``endDate`` (if given) is a valid ISO date not before ``startDate``

    Parameters
    ----------
    body : Any
        Decoded request body.  Anything other than a mapping is treated
        as an empty payload.

    Returns
    -------
    Dict[str, Any]
        Only the accepted fields, trimmed, keyed by attribute name
        (``name``, ``client_name``, ``status``, ``start_date``, ``end_date``).

    Raises
    ------
    ValidationFailure
        Listing every violated rule.
    """
    if not isinstance(body, Mapping):
        body = {}
    errors: List[str] = []

    name = body.get("name")
    if not _is_non_empty_string(name):
        errors.append("name is required and must be a non-empty string")

    client_name = body.get("clientName")
    if not _is_non_empty_string(client_name):
        errors.append("clientName is required and must be a non-empty string")

    status = body.get("status")
    if "status" in body and status not in STATUS_VALUES:
        errors.append(f"status must be one of: {', '.join(STATUS_VALUES)}")

    start_date = body.get("startDate")
    start: Optional[datetime] = None
    if not start_date:
        errors.append("startDate is required")
    else:
        start = parse_iso_date(start_date)
        if start is None:
            errors.append("startDate must be a valid ISO date string")

    end_date = body.get("endDate")
    if end_date is not None:
        end = parse_iso_date(end_date)
        if end is None:
            errors.append("endDate must be a valid ISO date string")
        elif start is not None and end < start:
            errors.append("endDate cannot be before startDate")

    if errors:
        raise ValidationFailure(errors)

    return {
        "name": name.strip(),
        "client_name": client_name.strip(),
        "status": ProjectStatus(status or ProjectStatus.ACTIVE.value),
        "start_date": start_date,
        "end_date": end_date,
    }


def validate_status_update(body: Any) -> ProjectStatus:
    """Validate the body of a status update request and return the new status."""
    status = body.get("status") if isinstance(body, Mapping) else None
    if not status or status not in STATUS_VALUES:
        raise ValidationFailure(
            f"status is required and must be one of: {', '.join(STATUS_VALUES)}"
        )
    return ProjectStatus(status)


def parse_iso_date(value: Any) -> Optional[datetime]:
    """Parse an ISO‑8601 date or date‑time string.

    Returns ``None`` for anything that is not a parseable string.  A
    trailing ``Z`` is accepted and naive values are taken as UTC so
    results can always be compared with each other.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""
