"""Request and response shapes for the auth proxy endpoints."""

from __future__ import annotations

import logging
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from jan_admin.schemas.common import checked_email

log = logging.getLogger("jan-admin.auth")

PASSWORD_MIN_LENGTH = 12
PASSWORD_MAX_LENGTH = 128


class LocalLoginRequest(BaseModel):
    """Email and password login payload."""

    email: Annotated[EmailStr, checked_email("Enter a valid email address")]
    password: str

    @field_validator("password")
    @classmethod
    def _check_password(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least 12 characters",
            )
        if len(v) > PASSWORD_MAX_LENGTH:
            raise PydanticCustomError("password_too_long", "Password is too long")
        return v


class GoogleCallbackRequest(BaseModel):
    """Authorization code and state returned by Google to the login page."""

    model_config = ConfigDict(extra="allow")

    code: str
    state: str


class AccessTokenResponse(BaseModel):
    """Token fields the console reads from an upstream login or refresh."""

    model_config = ConfigDict(extra="allow")

    access_token: Optional[str] = None
    # Seconds; some upstreams send a float
    expires_in: Optional[float] = None

    @classmethod
    def from_body(cls, body: Any) -> "AccessTokenResponse":
        if not isinstance(body, dict):
            return cls()
        try:
            return cls.model_validate(body)
        except ValidationError as e:
            log.warning(
                "Ignoring malformed token fields: %s",
                [".".join(map(str, err["loc"])) for err in e.errors()],
            )
            return cls()

    @property
    def has_token(self) -> bool:
        return bool(self.access_token and self.expires_in)


# Shape errors (wrong type, missing field) carry pydantic's generic wording
_SHAPE_ERROR_TYPES = frozenset({"missing", "model_type", "dict_type", "string_type"})


def first_error_message(exc: ValidationError, fallback: str = "Invalid payload") -> str:
    errors = exc.errors()
    if not errors or errors[0].get("type") in _SHAPE_ERROR_TYPES:
        return fallback
    return str(errors[0].get("msg") or fallback)
