"""Tests for console configuration."""

import pytest

from jan_admin.config import ConsoleConfig, get_config, reset_config


def test_defaults_from_env(monkeypatch):
    monkeypatch.delenv("JAN_ACCESS_COOKIE_NAME")
    reset_config()
    config = get_config()
    assert config.env == "test"
    assert config.api_base_url == "http://jan-api.local"
    assert config.access_cookie_name == "jan_access_token"
    assert config.upstream_timeout_seconds == 15.0
    assert config.session_refresh_seconds == 720
    assert config.cors_origins == []
    assert config.validate() == []


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("JAN_UPSTREAM_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("JAN_SESSION_REFRESH_SECONDS", "60")
    monkeypatch.setenv("JAN_CORS_ORIGINS", "https://a.example, https://b.example")
    reset_config()
    config = get_config()
    assert config.upstream_timeout_seconds == 2.5
    assert config.session_refresh_seconds == 60
    assert config.cors_origins == ["https://a.example", "https://b.example"]


def test_unparseable_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("JAN_SESSION_REFRESH_SECONDS", "soon")
    reset_config()
    assert get_config().session_refresh_seconds == 720


def test_get_config_is_cached():
    assert get_config() is get_config()


@pytest.mark.parametrize(
    "config,fragment",
    [
        (ConsoleConfig(env="qa"), "Invalid JAN_ENV"),
        (ConsoleConfig(env="prod"), "JAN_API_BASE_URL must be set"),
        (ConsoleConfig(env="staging"), "JAN_API_BASE_URL must be set"),
        (ConsoleConfig(api_base_url="ftp://jan"), "must be an http(s) URL"),
        (ConsoleConfig(access_cookie_name=" "), "JAN_ACCESS_COOKIE_NAME"),
        (ConsoleConfig(upstream_timeout_seconds=0), "JAN_UPSTREAM_TIMEOUT_SECONDS"),
        (ConsoleConfig(session_refresh_seconds=-1), "JAN_SESSION_REFRESH_SECONDS"),
        (
            ConsoleConfig(
                env="prod", api_base_url="https://api.jan.ai", cors_origins=["*"]
            ),
            "Wildcard CORS",
        ),
    ],
)
def test_validate_reports_problems(config, fragment):
    errors = config.validate()
    assert any(fragment in e for e in errors), errors


def test_prod_flags():
    config = ConsoleConfig(env="Production", api_base_url="https://api.jan.ai")
    assert config.is_prod
    assert config.is_prod_like
    assert not ConsoleConfig(env="staging").is_prod
    assert ConsoleConfig(env="staging").is_prod_like


def test_build_app_fails_on_invalid_config(monkeypatch):
    from jan_admin.main import build_app

    monkeypatch.setenv("JAN_ENV", "prod")
    monkeypatch.delenv("JAN_API_BASE_URL")
    reset_config()
    with pytest.raises(RuntimeError, match="Configuration validation failed"):
        build_app()


def test_build_app_requires_cors_in_prod(monkeypatch):
    from jan_admin.main import build_app

    monkeypatch.setenv("JAN_ENV", "prod")
    monkeypatch.setenv("JAN_API_BASE_URL", "https://api.jan.ai")
    reset_config()
    with pytest.raises(RuntimeError, match="JAN_CORS_ORIGINS must be set"):
        build_app()
