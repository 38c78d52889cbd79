"""Console configuration.

Handles upstream API settings and environment-based cookie flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

ADMIN_PREFIX = "/admin"
LOGIN_PATH = "/admin/login"
LOGIN_CALLBACK_PATH = "/admin/login/callback"
HOME_PATH = "/admin/overview"

DEV_CORS_ORIGINS = "http://localhost:3000,http://localhost:8000"


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        return default


def _env_csv(name: str) -> list[str]:
    raw = os.getenv(name) or ""
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class ConsoleConfig:
    """Console configuration from environment variables.

    Environment Variables:
        JAN_ENV: Environment (prod/staging/dev/test)
        JAN_API_BASE_URL: Upstream Jan API base URL
        JAN_ACCESS_COOKIE_NAME: Access-token cookie name (default: jan_access_token)
        JAN_UPSTREAM_TIMEOUT_SECONDS: Upstream request timeout (default: 15)
        JAN_SESSION_REFRESH_SECONDS: Session refresh interval (default: 720 = 12 minutes)
        JAN_CORS_ORIGINS: CSV of allowed CORS origins
    """

    env: str = "dev"
    api_base_url: Optional[str] = None
    access_cookie_name: str = "jan_access_token"
    upstream_timeout_seconds: float = 15.0
    session_refresh_seconds: int = 720
    cors_origins: list[str] = field(default_factory=list)

    @property
    def env_lower(self) -> str:
        return (self.env or "dev").strip().lower()

    @property
    def is_prod(self) -> bool:
        return self.env_lower in ("prod", "production")

    @property
    def is_prod_like(self) -> bool:
        return self.env_lower in ("prod", "production", "staging")

    @property
    def upstream_configured(self) -> bool:
        return bool((self.api_base_url or "").strip())

    def validate(self) -> list[str]:
        errors: list[str] = []

        valid_envs = {
            "prod",
            "production",
            "staging",
            "dev",
            "development",
            "local",
            "test",
        }
        if self.env_lower not in valid_envs:
            errors.append(
                f"Invalid JAN_ENV='{self.env}'. Valid values: {', '.join(sorted(valid_envs))}."
            )

        if self.is_prod_like and not self.upstream_configured:
            errors.append("JAN_API_BASE_URL must be set in production/staging")

        if self.api_base_url and not self.api_base_url.startswith(
            ("http://", "https://")
        ):
            errors.append(
                f"JAN_API_BASE_URL must be an http(s) URL, got '{self.api_base_url}'"
            )

        if not self.access_cookie_name.strip():
            errors.append("JAN_ACCESS_COOKIE_NAME cannot be empty")

        if self.upstream_timeout_seconds <= 0:
            errors.append("JAN_UPSTREAM_TIMEOUT_SECONDS must be positive")

        if self.session_refresh_seconds <= 0:
            errors.append("JAN_SESSION_REFRESH_SECONDS must be positive")

        if self.is_prod and "*" in self.cors_origins:
            errors.append("Wildcard CORS origin (*) is not allowed in production")

        return errors


@lru_cache(maxsize=1)
def get_config() -> ConsoleConfig:
    return ConsoleConfig(
        env=os.getenv("JAN_ENV", "dev"),
        api_base_url=(os.getenv("JAN_API_BASE_URL") or "").strip() or None,
        access_cookie_name=os.getenv("JAN_ACCESS_COOKIE_NAME", "jan_access_token"),
        upstream_timeout_seconds=_env_float("JAN_UPSTREAM_TIMEOUT_SECONDS", 15.0),
        session_refresh_seconds=_env_int("JAN_SESSION_REFRESH_SECONDS", 720),
        cors_origins=_env_csv("JAN_CORS_ORIGINS"),
    )


def reset_config() -> None:
    get_config.cache_clear()
