"""
Tests for the requests-based API client and the terminal menu.

The HTTP session is replaced by a ``Mock`` so no server is needed.
"""

from unittest.mock import Mock

import requests

import project_tracker_cli
from project_tracker_client import NETWORK_ERROR, ProjectTrackerAPI

PROJECT = {
    "id": "abc",
    "name": "Website",
    "clientName": "Acme",
    "status": "active",
    "startDate": "2026-01-15",
    "endDate": None,
    "isDeleted": False,
    "createdAt": "2026-01-01T00:00:00.000Z",
    "updatedAt": "2026-01-01T00:00:00.000Z",
}


def fake_response(status_code, payload=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.content = b"" if payload is None and not text else b"x"
    response.text = text
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    return response


def make_api(*responses):
    session = Mock()
    session.request.side_effect = list(responses)
    return ProjectTrackerAPI(base_url="http://api.test/", session=session), session


def test_create_project_unwraps_data():
    api, session = make_api(fake_response(201, {"data": PROJECT}))
    project, error = api.create_project({"name": "Website"})
    assert error is None
    assert project == PROJECT
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://api.test/projects"
    assert kwargs["json"] == {"name": "Website"}


def test_list_projects_drops_empty_filters():
    api, session = make_api(fake_response(200, {"data": [PROJECT]}))
    projects, error = api.list_projects(status="active", search="", sort=None, order="asc")
    assert error is None
    assert projects == [PROJECT]
    assert session.request.call_args.kwargs["params"] == {"status": "active", "order": "asc"}


def test_error_envelope_is_returned():
    api, _ = make_api(
        fake_response(
            400,
            {"error": {"code": "INVALID_STATUS_TRANSITION", "message": "Cannot transition from 'completed' to 'active'"}},
        )
    )
    project, error = api.update_status("abc", "active")
    assert project is None
    assert error == {
        "status_code": 400,
        "code": "INVALID_STATUS_TRANSITION",
        "message": "Cannot transition from 'completed' to 'active'",
    }


def test_non_json_error_body():
    api, _ = make_api(fake_response(502, text="Bad Gateway"))
    _, error = api.get_project("abc")
    assert error == {"status_code": 502, "code": "HTTP_ERROR", "message": "Bad Gateway"}


def test_delete_project_no_content():
    api, session = make_api(fake_response(204))
    assert api.delete_project("abc") == (True, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"


def test_network_failure():
    session = Mock()
    session.request.side_effect = requests.ConnectionError("refused")
    api = ProjectTrackerAPI(base_url="http://api.test", session=session)
    ok, error = api.health()
    assert ok is False
    assert error["code"] == NETWORK_ERROR
    assert error["status_code"] is None


def test_menu_creates_then_exits(capsys):
    api = Mock()
    api.create_project.return_value = (PROJECT, None)
    answers = iter(["1", "Website", "Acme", "2026-01-15", "", "", "0"])

    project_tracker_cli.run_menu(api, ask=lambda prompt: next(answers))

    api.create_project.assert_called_once_with(
        {"name": "Website", "clientName": "Acme", "startDate": "2026-01-15"}
    )
    out = capsys.readouterr().out
    assert "Project created successfully" in out
    assert "Goodbye!" in out


def test_menu_delete_requires_confirmation(capsys):
    api = Mock()
    answers = iter(["5", "abc", "n", "0"])
    project_tracker_cli.run_menu(api, ask=lambda prompt: next(answers))
    api.delete_project.assert_not_called()
    assert "Cancelled." in capsys.readouterr().out


def test_menu_prints_api_errors(capsys):
    api = Mock()
    api.get_project.return_value = (None, {"code": "PROJECT_NOT_FOUND", "message": "Project with id 'x' not found"})
    answers = iter(["3", "x", "0"])
    project_tracker_cli.run_menu(api, ask=lambda prompt: next(answers))
    assert "Error [PROJECT_NOT_FOUND]" in capsys.readouterr().out
