"""Shared fixtures for feedback relay tests."""

import json

import httpx
import pytest

from feedback_api.config import Settings


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from feedback_api.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import feedback_api.services.http_client as http_mod

    http_mod._client = None


@pytest.fixture
def mock_settings() -> Settings:
    """Provide a Settings object with safe test defaults."""
    return Settings(
        _env_file=None,
        environment="test",
        service_id="service_test",
        template_id="template_test",
        emailjs_public_key="public-key",
        emailjs_private_key="private-key",  # noqa: S106
        emailjs_url="https://emailjs.test/api/v1.0/email/send",
        emailjs_timeout=5.0,
    )


@pytest.fixture
def app(mock_settings):
    from feedback_api.main import create_app

    return create_app(mock_settings)


@pytest.fixture
def emailjs(mocker):
    """Stub the outbound EmailJS client. Set ``.status_code`` or ``.error`` to steer it.

    Only the client returned to the EmailJS service is replaced; requests
    made by tests against the app go through untouched. Every outbound
    ``httpx.Request`` is recorded in ``.calls``.
    """

    class FakeEmailJS:
        status_code = 200
        error: Exception | None = None

        def __init__(self) -> None:
            self.calls: list[httpx.Request] = []

        def handle(self, request: httpx.Request) -> httpx.Response:
            self.calls.append(request)
            if self.error is not None:
                raise self.error
            return httpx.Response(self.status_code, text="OK")

        def payload(self, index: int = 0) -> dict:
            return json.loads(self.calls[index].content)

    fake = FakeEmailJS()
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake.handle))
    mocker.patch(
        "feedback_api.services.emailjs.get_shared_client", return_value=client
    )
    return fake
