"""Test fixtures for the admin console."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

UPSTREAM = "http://jan-api.local"
COOKIE_NAME = "jan_access_token"
VALID_PASSWORD = "correct-horse-battery"


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Point the console at a fake upstream with test defaults."""
    monkeypatch.setenv("JAN_ENV", "test")
    monkeypatch.setenv("JAN_API_BASE_URL", UPSTREAM)
    monkeypatch.setenv("JAN_ACCESS_COOKIE_NAME", COOKIE_NAME)
    for key in (
        "JAN_CORS_ORIGINS",
        "JAN_UPSTREAM_TIMEOUT_SECONDS",
        "JAN_SESSION_REFRESH_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)

    from jan_admin.config import reset_config

    reset_config()
    yield
    reset_config()


@pytest.fixture
def app(setup_test_env):
    """Create the FastAPI app with the test environment."""
    from jan_admin.main import build_app

    return build_app()


@pytest.fixture
def client(app):
    """Test client without a session cookie."""
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture
def authed_client(app):
    """Test client carrying an access-token cookie."""
    with TestClient(app, follow_redirects=False) as c:
        c.cookies.set(COOKIE_NAME, "tok_existing")
        yield c


@pytest.fixture
def console_factory(app):
    """Return a function that builds a services Console wired to the app."""
    from jan_admin.services import Console

    def _factory(**kwargs):
        return Console(
            "http://testserver",
            transport=httpx.ASGITransport(app=app),
            **kwargs,
        )

    return _factory


class FakeJanApi:
    """Stateful stand-in for the Jan API projects endpoints, served by respx."""

    def __init__(self, respx_mock):
        self.projects: list[dict] = []
        self._next_id = 1
        respx_mock.get(path="/v1/organization/projects").mock(side_effect=self._list)
        respx_mock.post(path="/v1/organization/projects").mock(
            side_effect=self._create
        )
        respx_mock.post(
            path__regex=r"^/v1/organization/projects/(?P<project_id>[^/]+)$"
        ).mock(side_effect=self._rename)

    def _list(self, request):
        include_archived = request.url.params.get("include_archived") == "true"
        data = [
            p for p in self.projects if include_archived or p["archived_at"] is None
        ]
        return httpx.Response(
            200,
            json={
                "object": "list",
                "data": data,
                "first_id": data[0]["id"] if data else None,
                "last_id": data[-1]["id"] if data else None,
                "has_more": False,
            },
        )

    def _create(self, request):
        body = json.loads(request.content)
        project = {
            "object": "project",
            "id": f"proj_{self._next_id}",
            "name": body["name"],
            "created_at": 1700000000 + self._next_id,
            "archived_at": None,
            "status": "active",
        }
        self._next_id += 1
        self.projects.append(project)
        return httpx.Response(200, json=project)

    def _rename(self, request, project_id):
        body = json.loads(request.content)
        for project in self.projects:
            if project["id"] == project_id:
                project["name"] = body["name"]
                return httpx.Response(200, json=project)
        return httpx.Response(404, json={"error": "project not found"})


@pytest.fixture
def fake_jan_api(respx_mock):
    return FakeJanApi(respx_mock)
