"""ASGI entrypoint for the admin console.

Use this in uvicorn/gunicorn:  jan_admin.asgi:app
"""

from __future__ import annotations

from jan_admin.main import build_app

app = build_app()
