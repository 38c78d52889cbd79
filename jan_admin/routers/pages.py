"""Admin page shells.

Serves the minimal HTML documents the console client hydrates. Access to
these paths is decided by AccessGateMiddleware before they are reached.
"""

from __future__ import annotations

import html

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse

from jan_admin.config import HOME_PATH, get_config

router = APIRouter(tags=["pages"], include_in_schema=False)

ADMIN_PAGES: dict[str, str] = {
    "login": "Sign in",
    "login/callback": "Completing sign in",
    "overview": "Overview",
    "organization": "Organization",
    "projects": "Projects",
    "providers": "Providers",
    "invites": "Invites",
    "users": "Members",
    "api-keys": "Admin API keys",
    "audit-logs": "Audit logs",
    "settings/smtp": "SMTP settings",
    "settings/workspace-quotas": "Workspace quotas",
}

_SHELL = """\
<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width,initial-scale=1"/>
  <title>{title} | Jan Admin</title>
</head>
<body>
  <main id="app" data-page="{page}" data-refresh-seconds="{refresh_seconds}">
    <h1>{title}</h1>
  </main>
</body>
</html>
"""


def render_shell(page: str, title: str) -> str:
    return _SHELL.format(
        page=html.escape(page),
        title=html.escape(title),
        refresh_seconds=get_config().session_refresh_seconds,
    )


@router.get("/")
async def root() -> RedirectResponse:
    return RedirectResponse(url=HOME_PATH, status_code=307)


@router.get("/admin")
async def admin_root() -> RedirectResponse:
    return RedirectResponse(url=HOME_PATH, status_code=307)


@router.get("/admin/{page:path}", response_class=HTMLResponse)
async def admin_page(page: str) -> HTMLResponse:
    page = page.strip("/")
    title = ADMIN_PAGES.get(page)
    if title is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return HTMLResponse(render_shell(page, title))
