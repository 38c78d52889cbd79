"""Tests for local input shapes."""

import pytest
from pydantic import ValidationError

from jan_admin.auth.schemas import (
    AccessTokenResponse,
    LocalLoginRequest,
    first_error_message,
)
from jan_admin.schemas import CreateInviteInput, SmtpSettingsInput
from jan_admin.tests.conftest import VALID_PASSWORD


def _message(model, data) -> str:
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(data)
    return first_error_message(exc_info.value)


def test_login_email_is_stripped():
    payload = LocalLoginRequest.model_validate(
        {"email": "  admin@jan.ai\n", "password": VALID_PASSWORD}
    )
    assert payload.email == "admin@jan.ai"


@pytest.mark.parametrize(
    "email", ["bad", "a..b@jan.ai", "admin@", "@jan.ai", "admin@jan..ai", ""]
)
def test_login_rejects_malformed_email(email):
    assert (
        _message(LocalLoginRequest, {"email": email, "password": VALID_PASSWORD})
        == "Enter a valid email address"
    )


def test_login_non_string_email_is_a_payload_error():
    assert (
        _message(LocalLoginRequest, {"email": 42, "password": VALID_PASSWORD})
        == "Invalid payload"
    )


def test_invite_email_message():
    assert (
        _message(CreateInviteInput, {"email": "a..b@jan.ai", "role": "reader"})
        == "Invalid email"
    )


def test_invite_email_normalised():
    invite = CreateInviteInput.model_validate(
        {"email": " new@jan.ai ", "role": "owner"}
    )
    assert invite.email == "new@jan.ai"


def test_smtp_sender_email_checked():
    assert (
        _message(
            SmtpSettingsInput,
            {
                "enabled": True,
                "host": "smtp.jan.ai",
                "port": 587,
                "username": "mailer",
                "from_email": "noreply",
            },
        )
        == "Invalid email"
    )


def test_fractional_expires_in_is_accepted():
    tokens = AccessTokenResponse.from_body(
        {"access_token": "tok_abc", "expires_in": 899.5}
    )
    assert tokens.has_token
    assert tokens.expires_in == 899.5


def test_malformed_token_fields_are_logged(caplog):
    with caplog.at_level("WARNING", logger="jan-admin.auth"):
        tokens = AccessTokenResponse.from_body(
            {"access_token": "tok_abc", "expires_in": "soon"}
        )
    assert not tokens.has_token
    assert "expires_in" in caplog.text
    assert "tok_abc" not in caplog.text
