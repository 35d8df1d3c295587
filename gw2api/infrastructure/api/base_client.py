"""
Base API Client

Configuration and transport setup shared by the async and blocking clients.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from ...core.config import API_BASE_URL
from ...core.models import Authentication, Language, PendingRequest

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "2022-03-23T19:00:00.000Z"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration a client is built from."""
    access_token: Optional[str] = None
    language: Language = Language.EN
    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    rate_limit: Optional[int] = None


def default_headers() -> Dict[str, str]:
    """Headers sent with every request."""
    return {
        "Accept": "application/json",
        "X-Schema-Version": SCHEMA_VERSION,
    }


def request_headers(request: PendingRequest, access_token: Optional[str]) -> Dict[str, str]:
    """Per-request headers. The bearer token is sent unless the endpoint is public."""
    headers = {}
    if access_token and request.authentication is not Authentication.NONE:
        headers["Authorization"] = f"Bearer {access_token}"
    return headers


def create_http_client(
    config: ClientConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """
    Create the HTTP client backing an API client.

    Args:
        config: Client configuration
        transport: Optional transport, e.g. httpx.MockTransport in tests

    Returns:
        Configured httpx.AsyncClient
    """
    client = httpx.AsyncClient(
        base_url=config.base_url.rstrip('/'),
        timeout=httpx.Timeout(config.timeout),
        headers=default_headers(),
        transport=transport
    )
    logger.info(f"API client initialized for {config.base_url}")
    return client
