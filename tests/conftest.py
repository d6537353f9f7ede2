"""Shared fixtures: a fresh store, service, app and HTTP client per test."""

import pytest
from fastapi.testclient import TestClient

from project_tracker_api.app.data.project_store import ProjectStore
from project_tracker_api.app.main import create_app
from project_tracker_api.app.services.project_service import ProjectService
from tests.helpers import valid_project


@pytest.fixture
def store():
    return ProjectStore()


@pytest.fixture
def service(store):
    return ProjectService(store)


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_project(client):
    """Create a project over HTTP and return its JSON representation."""

    def _create(**overrides):
        resp = client.post("/projects", json=valid_project(**overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _create
