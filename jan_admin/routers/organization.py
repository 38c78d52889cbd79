"""Organization router.

1:1 proxies from /api/jan/... to the Jan API /v1/... for projects,
providers, invites, members, admin API keys, settings and audit logs.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from jan_admin.upstream import (
    UPSTREAM_ERRORS,
    UpstreamClient,
    error_response,
    get_upstream,
    read_json,
)

log = logging.getLogger("jan-admin.organization-router")

router = APIRouter(prefix="/api/jan", tags=["organization"])


async def _read_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


async def _forward(
    request: Request,
    upstream_client: UpstreamClient,
    method: str,
    path: str,
    *,
    failure: str,
    with_query: bool = False,
    with_body: bool = False,
) -> Response:
    """Relay one call upstream and hand back its JSON and status unchanged."""
    params = request.url.query if with_query and request.url.query else None
    body = await _read_body(request) if with_body else None
    try:
        upstream = await upstream_client.request(
            request,
            method,
            path,
            params=params,
            json_body=body,
            send_body=with_body,
        )
    except UPSTREAM_ERRORS as e:
        log.exception("%s %s failed: %s", method, path, e)
        return error_response(500, failure)
    if upstream.status_code == 204:
        return Response(status_code=204)
    return JSONResponse(content=read_json(upstream), status_code=upstream.status_code)


# --- Overview ---


@router.get("/organization/overview")
async def get_overview(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/overview",
        failure="Unable to load organization overview",
    )


# --- Projects ---


@router.get("/organization/projects")
async def list_projects(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/projects",
        failure="Unable to load organization projects",
        with_query=True,
    )


@router.post("/organization/projects")
async def create_project(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "POST",
        "/v1/organization/projects",
        failure="Unable to create project",
        with_body=True,
    )


@router.post("/organization/projects/{project_id}")
async def update_project(
    project_id: str,
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    return await _forward(
        request,
        upstream_client,
        "POST",
        f"/v1/organization/projects/{project_id}",
        failure="Unable to update project",
        with_body=True,
    )


@router.post("/organization/projects/{project_id}/archive")
async def archive_project(
    project_id: str,
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    return await _forward(
        request,
        upstream_client,
        "POST",
        f"/v1/organization/projects/{project_id}/archive",
        failure="Unable to archive project",
    )


# --- Providers ---


@router.get("/models/providers")
async def list_providers(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/models/providers",
        failure="Unable to load providers",
    )


@router.get("/organization/providers/vendors")
async def list_provider_vendors(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/providers/vendors",
        failure="Unable to load provider vendors",
    )


@router.post("/organization/models/providers")
async def create_provider(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "POST",
        "/v1/organization/models/providers",
        failure="Unable to create provider",
        with_body=True,
    )


@router.patch("/organization/models/providers/{provider_id}")
async def update_provider(
    provider_id: str,
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    return await _forward(
        request,
        upstream_client,
        "PATCH",
        f"/v1/organization/models/providers/{provider_id}",
        failure="Unable to update provider",
        with_body=True,
    )


@router.post("/organization/models/providers/{provider_id}/sync")
async def sync_provider(
    provider_id: str,
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    return await _forward(
        request,
        upstream_client,
        "POST",
        f"/v1/organization/models/providers/{provider_id}/sync",
        failure="Unable to sync provider models",
    )


# --- Invites ---


@router.get("/organization/invites")
async def list_invites(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/invites",
        failure="Unable to load invites",
        with_query=True,
    )


@router.post("/organization/invites")
async def create_invite(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "POST",
        "/v1/organization/invites",
        failure="Unable to create invite",
        with_body=True,
    )


@router.delete("/organization/invites/{invite_id}")
async def delete_invite(
    invite_id: str,
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    return await _forward(
        request,
        upstream_client,
        "DELETE",
        f"/v1/organization/invites/{invite_id}",
        failure="Unable to delete invite",
    )


# --- Members ---


@router.get("/organization/members")
async def list_members(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/members",
        failure="Unable to load organization members",
        with_query=True,
    )


@router.patch("/organization/members/{user_public_id}")
async def update_member(
    user_public_id: str,
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    return await _forward(
        request,
        upstream_client,
        "PATCH",
        f"/v1/organization/members/{user_public_id}",
        failure="Unable to update organization member",
        with_body=True,
    )


# --- Admin API keys ---


@router.get("/organization/admin-api-keys")
async def list_admin_api_keys(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/admin_api_keys",
        failure="Unable to load admin API keys",
        with_query=True,
    )


@router.post("/organization/admin-api-keys")
async def create_admin_api_key(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "POST",
        "/v1/organization/admin_api_keys",
        failure="Unable to create admin API key",
        with_body=True,
    )


@router.delete("/organization/admin-api-keys/{key_id}")
async def delete_admin_api_key(
    key_id: str,
    request: Request,
    upstream_client: UpstreamClient = Depends(get_upstream),
):
    return await _forward(
        request,
        upstream_client,
        "DELETE",
        f"/v1/organization/admin_api_keys/{key_id}",
        failure="Unable to delete admin API key",
    )


# --- Settings ---


@router.get("/organization/settings/smtp")
async def get_smtp_settings(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/settings/smtp",
        failure="Unable to load SMTP settings",
    )


@router.put("/organization/settings/smtp")
async def update_smtp_settings(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "PUT",
        "/v1/organization/settings/smtp",
        failure="Unable to update SMTP settings",
        with_body=True,
    )


@router.get("/organization/settings/workspace-quotas")
async def get_workspace_quotas(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/settings/workspace-quotas",
        failure="Unable to load workspace quotas",
    )


@router.put("/organization/settings/workspace-quotas")
async def update_workspace_quotas(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "PUT",
        "/v1/organization/settings/workspace-quotas",
        failure="Unable to update workspace quotas",
        with_body=True,
    )


# --- Audit logs ---


@router.get("/organization/audit-logs")
async def list_audit_logs(
    request: Request, upstream_client: UpstreamClient = Depends(get_upstream)
):
    return await _forward(
        request,
        upstream_client,
        "GET",
        "/v1/organization/audit-logs",
        failure="Unable to load audit logs",
        with_query=True,
    )
