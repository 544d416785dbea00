"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment.

    The EmailJS credentials have no defaults: constructing ``Settings``
    without them raises, so a misconfigured deployment fails at startup
    rather than on the first submission.
    """

    # App
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # EmailJS (SERVICE_ID, TEMPLATE_ID, EMAILJS_* in the environment)
    service_id: str
    template_id: str
    emailjs_public_key: str
    emailjs_private_key: str
    emailjs_url: str
    emailjs_timeout: float = 15.0  # seconds

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
