"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from holonet.config import Settings

_ENV_VARS = [
    "DEBUG", "REQUEST_TIMEOUT_MS", "PORT", "HOST", "BASE_URL",
    "VERIFY_TLS", "CURSOR_LIMIT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an environment without HOLONET settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_has_defaults():
    """Settings should work with no environment at all."""
    settings = Settings(_env_file=None)

    assert settings.debug is True
    assert settings.request_timeout_ms == 5000
    assert settings.port == 3000
    assert settings.base_url == "https://swapi.dev/api"
    assert settings.verify_tls is False
    assert settings.cursor_limit == 4
    assert settings.log_level == "INFO"


def test_port_from_env(monkeypatch):
    """PORT overrides the listen port."""
    monkeypatch.setenv("PORT", "8080")

    assert Settings(_env_file=None).port == 8080


def test_debug_from_env(monkeypatch):
    """DEBUG=false turns debug mode off."""
    monkeypatch.setenv("DEBUG", "false")

    assert Settings(_env_file=None).debug is False


def test_request_timeout_in_seconds(monkeypatch):
    """request_timeout converts milliseconds to seconds."""
    monkeypatch.setenv("REQUEST_TIMEOUT_MS", "2500")

    settings = Settings(_env_file=None)

    assert settings.request_timeout_ms == 2500
    assert settings.request_timeout == pytest.approx(2.5)


def test_rejects_non_positive_timeout(monkeypatch):
    """A zero timeout is invalid."""
    monkeypatch.setenv("REQUEST_TIMEOUT_MS", "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_rejects_out_of_range_port(monkeypatch):
    """Ports above 65535 are invalid."""
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_validates_log_level(monkeypatch):
    """Settings should validate log level."""
    monkeypatch.setenv("LOG_LEVEL", "INVALID")

    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert "log_level must be one of" in str(exc_info.value)


def test_log_level_uppercased(monkeypatch):
    """Log level is normalized to upper case."""
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_base_url_trailing_slash_stripped(monkeypatch):
    """A trailing slash on BASE_URL is removed."""
    monkeypatch.setenv("BASE_URL", "https://swapi.example.org/api/")

    assert Settings(_env_file=None).base_url == "https://swapi.example.org/api"


def test_settings_loads_from_env_file(tmp_path):
    """Values in a .env file are picked up."""
    env_file = tmp_path / ".env"
    env_file.write_text("CURSOR_LIMIT=2\nVERIFY_TLS=true\n")

    settings = Settings(_env_file=str(env_file))

    assert settings.cursor_limit == 2
    assert settings.verify_tls is True
