"""Tests for the /api/jan organization proxy endpoints."""

import json

import httpx
import pytest


@pytest.mark.parametrize(
    "method,local_path,upstream_path",
    [
        ("GET", "/api/jan/organization/overview", "/v1/organization/overview"),
        ("GET", "/api/jan/organization/projects", "/v1/organization/projects"),
        ("GET", "/api/jan/models/providers", "/v1/models/providers"),
        (
            "GET",
            "/api/jan/organization/providers/vendors",
            "/v1/organization/providers/vendors",
        ),
        (
            "POST",
            "/api/jan/organization/models/providers/prov_1/sync",
            "/v1/organization/models/providers/prov_1/sync",
        ),
        ("GET", "/api/jan/organization/invites", "/v1/organization/invites"),
        ("GET", "/api/jan/organization/members", "/v1/organization/members"),
        (
            "GET",
            "/api/jan/organization/admin-api-keys",
            "/v1/organization/admin_api_keys",
        ),
        (
            "DELETE",
            "/api/jan/organization/admin-api-keys/key_1",
            "/v1/organization/admin_api_keys/key_1",
        ),
        (
            "GET",
            "/api/jan/organization/settings/smtp",
            "/v1/organization/settings/smtp",
        ),
        (
            "GET",
            "/api/jan/organization/settings/workspace-quotas",
            "/v1/organization/settings/workspace-quotas",
        ),
        ("GET", "/api/jan/organization/audit-logs", "/v1/organization/audit-logs"),
        (
            "POST",
            "/api/jan/organization/projects/proj_1/archive",
            "/v1/organization/projects/proj_1/archive",
        ),
        (
            "DELETE",
            "/api/jan/organization/invites/inv_1",
            "/v1/organization/invites/inv_1",
        ),
    ],
)
def test_routes_map_to_upstream(
    authed_client, respx_mock, method, local_path, upstream_path
):
    route = respx_mock.route(method=method, path=upstream_path).respond(
        200, json={"ok": True}
    )
    response = authed_client.request(method, local_path)
    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert route.called


def test_credentials_forwarded(authed_client, respx_mock):
    route = respx_mock.get(path="/v1/organization/overview").respond(200, json={})
    authed_client.get(
        "/api/jan/organization/overview", headers={"X-Request-Id": "req-42"}
    )
    request = route.calls.last.request
    assert request.headers["authorization"] == "Bearer tok_existing"
    assert "jan_access_token=tok_existing" in request.headers["cookie"]
    assert request.headers["x-request-id"] == "req-42"


def test_anonymous_call_sends_no_bearer(client, respx_mock):
    route = respx_mock.get(path="/v1/organization/overview").respond(
        401, json={"error": "unauthorized"}
    )
    response = client.get("/api/jan/organization/overview")
    assert response.status_code == 401
    assert response.json() == {"error": "unauthorized"}
    assert "authorization" not in route.calls.last.request.headers


def test_query_string_forwarded(authed_client, respx_mock):
    route = respx_mock.get(path="/v1/organization/audit-logs").respond(
        200, json={"data": [], "total": 0}
    )
    authed_client.get(
        "/api/jan/organization/audit-logs", params={"limit": 25, "after": "40"}
    )
    params = route.calls.last.request.url.params
    assert params["limit"] == "25"
    assert params["after"] == "40"


def test_body_forwarded(authed_client, respx_mock):
    route = respx_mock.post(path="/v1/organization/projects").respond(
        200, json={"id": "proj_1", "name": "Docs"}
    )
    response = authed_client.post(
        "/api/jan/organization/projects", json={"name": "Docs"}
    )
    assert response.status_code == 200
    request = route.calls.last.request
    assert json.loads(request.content) == {"name": "Docs"}
    assert request.headers["content-type"] == "application/json"


@pytest.mark.parametrize(
    "method,local_path,upstream_path",
    [
        (
            "PATCH",
            "/api/jan/organization/members/usr_1",
            "/v1/organization/members/usr_1",
        ),
        (
            "PUT",
            "/api/jan/organization/settings/smtp",
            "/v1/organization/settings/smtp",
        ),
        (
            "PATCH",
            "/api/jan/organization/models/providers/prov_1",
            "/v1/organization/models/providers/prov_1",
        ),
    ],
)
def test_mutations_forward_body(
    authed_client, respx_mock, method, local_path, upstream_path
):
    route = respx_mock.route(method=method, path=upstream_path).respond(
        200, json={"updated": True}
    )
    response = authed_client.request(method, local_path, json={"field": "value"})
    assert response.status_code == 200
    assert json.loads(route.calls.last.request.content) == {"field": "value"}


def test_upstream_status_and_body_pass_through(authed_client, respx_mock):
    respx_mock.post(path="/v1/organization/invites").respond(
        409, json={"error": "invite already exists"}
    )
    response = authed_client.post(
        "/api/jan/organization/invites", json={"email": "a@b.co"}
    )
    assert response.status_code == 409
    assert response.json() == {"error": "invite already exists"}


def test_no_content_passes_through(authed_client, respx_mock):
    respx_mock.delete(path="/v1/organization/invites/inv_1").respond(204)
    response = authed_client.delete("/api/jan/organization/invites/inv_1")
    assert response.status_code == 204
    assert response.content == b""


def test_transport_failure_is_500(authed_client, respx_mock):
    respx_mock.get(path="/v1/organization/members").mock(
        side_effect=httpx.ConnectError
    )
    response = authed_client.get("/api/jan/organization/members")
    assert response.status_code == 500
    assert response.json() == {"error": "Unable to load organization members"}


def test_upstream_redirect_not_followed(authed_client, respx_mock):
    respx_mock.get(path="/v1/organization/overview").respond(
        302, headers={"location": "https://elsewhere.example/"}
    )
    response = authed_client.get("/api/jan/organization/overview")
    assert response.status_code == 302
    assert "location" not in response.headers


def test_unconfigured_upstream_is_503(monkeypatch):
    from fastapi.testclient import TestClient

    from jan_admin.config import reset_config
    from jan_admin.main import build_app

    monkeypatch.delenv("JAN_API_BASE_URL")
    reset_config()

    with TestClient(build_app()) as client:
        response = client.get("/api/jan/organization/projects")
    assert response.status_code == 503
    assert response.json() == {"error": "Upstream API not configured"}
