"""Shared envelope pieces for upstream JSON."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)
from pydantic_core import PydanticCustomError


def checked_email(message: str) -> WrapValidator:
    """Wrap an EmailStr field: strip whitespace, fail with a fixed message.

    Non-string input is left to the field's own type error.
    """

    def _validate(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        if not isinstance(value, str):
            return handler(value)
        try:
            return handler(value.strip())
        except ValidationError as e:
            raise PydanticCustomError("email", message) from e

    return WrapValidator(_validate)


class UpstreamModel(BaseModel):
    """Base for upstream records; unknown fields are kept, not rejected."""

    model_config = ConfigDict(extra="allow")


class ListEnvelope(UpstreamModel):
    """Cursor fields shared by upstream list responses."""

    total: Optional[int] = None
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: Optional[bool] = None
