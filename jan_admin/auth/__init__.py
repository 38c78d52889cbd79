"""Authentication package for the admin console.

Provides access-token cookie handling and the auth payload shapes.
"""

from jan_admin.auth.cookies import (
    copy_set_cookies_from_upstream,
    delete_access_token_cookie,
    get_access_token,
    set_access_token_cookie,
)
from jan_admin.auth.schemas import (
    AccessTokenResponse,
    GoogleCallbackRequest,
    LocalLoginRequest,
    first_error_message,
)

__all__ = [
    # Cookies
    "get_access_token",
    "set_access_token_cookie",
    "delete_access_token_cookie",
    "copy_set_cookies_from_upstream",
    # Schemas
    "LocalLoginRequest",
    "GoogleCallbackRequest",
    "AccessTokenResponse",
    "first_error_message",
]
