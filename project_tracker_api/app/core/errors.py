"""
Typed failures raised by validators and services.

Each error carries a machine‑readable ``code`` and a human‑readable
``message``.  The core never decides how an error is rendered; the
HTTP layer (``api/errors.py``) maps each type to a transport status and
response envelope.
"""

from __future__ import annotations

from typing import List, Optional

VALIDATION_ERROR = "VALIDATION_ERROR"
PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class AppError(Exception):
    """Base class for expected, intentional application errors."""

    code: str = "BAD_REQUEST"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ValidationFailure(AppError):
    """Client supplied malformed, missing or out‑of‑range input.

    ``problems`` holds every individual rule violation; ``message`` is
    the same list joined into one string.
    """

    code = VALIDATION_ERROR
    delimiter = "; "

    def __init__(self, problems: List[str] | str) -> None:
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        super().__init__(self.delimiter.join(self.problems))


class NotFound(AppError):
    """The identifier does not resolve to a visible, non‑deleted project."""

    code = PROJECT_NOT_FOUND

    def __init__(self, project_id: str) -> None:
        self.project_id = project_id
        super().__init__(f"Project with id '{project_id}' not found")


class InvalidTransition(AppError):
    """A status change that the lifecycle does not allow."""

    code = INVALID_STATUS_TRANSITION

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot transition from '{current}' to '{requested}'")
