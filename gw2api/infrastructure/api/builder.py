"""
Client Builder

Fluent construction of Client and BlockingClient.
"""

from typing import Optional, Union

import httpx

from ...core.config import API_BASE_URL, ClientSettings, get_settings
from ...core.models import Language
from .base_client import ClientConfig, DEFAULT_TIMEOUT
from .blocking import BlockingClient
from .client import Client


class ClientBuilder:
    """
    Collects client options before building.

    Example:
        client = (
            Client.builder()
            .access_token(key)
            .language(Language.DE)
            .rate_limit(300)
            .build()
        )
    """

    def __init__(self):
        self._access_token: Optional[str] = None
        self._language = Language.EN
        self._base_url = API_BASE_URL
        self._timeout = DEFAULT_TIMEOUT
        self._rate_limit: Optional[int] = None
        self._transport: Optional[httpx.AsyncBaseTransport] = None

    @classmethod
    def from_settings(cls, settings: Optional[ClientSettings] = None) -> "ClientBuilder":
        """Create a builder pre-filled from ClientSettings, loaded from the environment when omitted."""
        if settings is None:
            settings = get_settings()
        builder = (
            cls()
            .language(settings.language)
            .base_url(settings.base_url)
            .timeout(settings.timeout)
        )
        if settings.access_token:
            builder.access_token(settings.access_token)
        if settings.rate_limit:
            builder.rate_limit(settings.rate_limit)
        return builder

    def access_token(self, token: str) -> "ClientBuilder":
        self._access_token = token
        return self

    def language(self, language: Union[Language, str]) -> "ClientBuilder":
        self._language = Language(language)
        return self

    def base_url(self, base_url: str) -> "ClientBuilder":
        self._base_url = base_url
        return self

    def timeout(self, timeout: float) -> "ClientBuilder":
        self._timeout = timeout
        return self

    def rate_limit(self, limit: int) -> "ClientBuilder":
        """Allow at most ``limit`` requests per minute."""
        self._rate_limit = limit
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "ClientBuilder":
        self._transport = transport
        return self

    def config(self) -> ClientConfig:
        return ClientConfig(
            access_token=self._access_token,
            language=self._language,
            base_url=self._base_url,
            timeout=self._timeout,
            rate_limit=self._rate_limit
        )

    def build(self) -> Client:
        return Client(self.config(), transport=self._transport)

    def build_blocking(self) -> BlockingClient:
        return BlockingClient(self.config(), transport=self._transport)
