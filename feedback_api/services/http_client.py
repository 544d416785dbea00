"""Shared HTTP client utilities — reusable httpx client."""

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0

# Module-level shared client (created lazily, lives for the process lifetime)
_client: httpx.AsyncClient | None = None


def get_shared_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Return a shared httpx.AsyncClient, creating it on first call.

    ``timeout`` only applies when the client is created; callers needing a
    different per-request timeout pass it to the request itself.
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(timeout=timeout)
    return _client


async def close_shared_client() -> None:
    """Close the shared client, if one was created."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        logger.debug("Shared HTTP client closed")
    _client = None


def json_headers() -> dict[str, str]:
    return {"Content-Type": "application/json"}
