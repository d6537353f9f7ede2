"""Project Tracker API client.

A thin wrapper around the project endpoints using the ``requests``
library.  Every operation returns a tuple ``(result, error)``:

* on success ``error`` is ``None`` and ``result`` holds the unwrapped
  ``data`` of the response (a project, a list of projects, or ``True``
  for a delete);
* on failure ``result`` is ``None`` (or ``False``/``[]``) and ``error``
  is a dictionary with ``status_code``, ``code`` and ``message``, taken
  from the server's ``{"error": {...}}`` envelope when there is one.

Connection problems are reported with code ``NETWORK_ERROR`` instead
of raising, so interactive front ends can print them and carry on.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

NETWORK_ERROR = "NETWORK_ERROR"

Error = Dict[str, Any]


class ProjectTrackerAPI:
    """Client for the Project Tracker HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/projects``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (``None`` for empty responses such as 204).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "code": NETWORK_ERROR, "message": str(exc)}

        if response.ok:
            if response.content:
                return response.json(), None
            return None, None

        code = "HTTP_ERROR"
        message = ""
        try:
            err_json = response.json()
            envelope = err_json.get("error") if isinstance(err_json, dict) else None
            if isinstance(envelope, dict):
                code = envelope.get("code") or code
                message = envelope.get("message") or ""
            else:
                message = str(err_json)
        except ValueError:
            message = response.text
        if not message:
            message = f"HTTP {response.status_code}"
        logger.error("API request failed (%s %s): %s", response.status_code, code, message)
        return None, {"status_code": response.status_code, "code": code, "message": message}

    @staticmethod
    def _unwrap(data: Any) -> Any:
        if isinstance(data, dict) and "data" in data:
            return data["data"]
        return data

    # ------------------------------------------------------------------
    # Project operations
    # ------------------------------------------------------------------
    def create_project(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a project from ``name``, ``clientName``, ``startDate`` and optional fields."""
        data, error = self._request("POST", "/projects", json_body=payload)
        if error:
            return None, error
        return self._unwrap(data), None

    def list_projects(
        self,
        *,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List projects.  Empty filters are not sent."""
        params = {
            key: value
            for key, value in (("status", status), ("search", search), ("sort", sort), ("order", order))
            if value
        }
        data, error = self._request("GET", "/projects", params=params or None)
        if error:
            return [], error
        projects = self._unwrap(data)
        return projects if isinstance(projects, list) else [], None

    def get_project(self, project_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/projects/{project_id}")
        if error:
            return None, error
        return self._unwrap(data), None

    def update_status(self, project_id: str, status: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request(
            "PATCH", f"/projects/{project_id}/status", json_body={"status": status}
        )
        if error:
            return None, error
        return self._unwrap(data), None

    def delete_project(self, project_id: str) -> Tuple[bool, Optional[Error]]:
        """Soft-delete a project.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/projects/{project_id}")
        if error:
            return False, error
        return True, None

    def health(self) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("GET", "/health")
        if error:
            return False, error
        return isinstance(data, dict) and data.get("status") == "ok", None
