"""Admin console routers."""

from jan_admin.routers.auth import router as auth_router
from jan_admin.routers.organization import router as organization_router
from jan_admin.routers.pages import router as pages_router

__all__ = ["auth_router", "organization_router", "pages_router"]
