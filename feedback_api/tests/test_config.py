"""Tests for configuration loading and startup validation."""

import pytest
from pydantic import ValidationError

from feedback_api.config import Settings, get_settings

REQUIRED_ENV = {
    "SERVICE_ID": "svc",
    "TEMPLATE_ID": "tpl",
    "EMAILJS_PUBLIC_KEY": "pub",
    "EMAILJS_PRIVATE_KEY": "priv",
    "EMAILJS_URL": "https://emailjs.test/send",
}


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Empty EmailJS environment, run from a directory without a .env file."""
    monkeypatch.chdir(tmp_path)
    for name in REQUIRED_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_reads_credentials_from_environment(clean_env):
    for name, value in REQUIRED_ENV.items():
        clean_env.setenv(name, value)

    settings = get_settings()

    assert settings.service_id == "svc"
    assert settings.template_id == "tpl"
    assert settings.emailjs_public_key == "pub"
    assert settings.emailjs_private_key == "priv"
    assert settings.emailjs_url == "https://emailjs.test/send"
    assert settings.emailjs_timeout == 15.0


@pytest.mark.parametrize("missing", sorted(REQUIRED_ENV))
def test_missing_credential_fails(clean_env, missing):
    for name, value in REQUIRED_ENV.items():
        if name != missing:
            clean_env.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings()


def test_create_app_fails_without_configuration(clean_env):
    from feedback_api.main import create_app

    with pytest.raises(ValidationError):
        create_app()


def test_create_app_reads_environment(clean_env):
    from feedback_api.main import create_app

    for name, value in REQUIRED_ENV.items():
        clean_env.setenv(name, value)

    app = create_app()

    assert app.state.settings.service_id == "svc"
