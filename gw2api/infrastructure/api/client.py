"""
Async API Client

Executes requests on the caller's event loop.
"""

import logging
import threading
from typing import Any, Optional

import httpx

from ...core.exceptions import NoAccessTokenError
from ...core.models import Authentication, Language, PendingRequest
from ...core.protocols import ClientExecutor
from ...utils.logging_utils import mask_token
from .base_client import ClientConfig, create_http_client, request_headers
from .rate_limiter import RateLimiter
from .response import ResponseFuture

logger = logging.getLogger(__name__)


class SharedHttpClient:
    """
    An httpx.AsyncClient owned jointly by a client and its clones.

    Each owner holds one reference; the HTTP client is closed only when
    the last reference is released.
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http
        self._owners = 1
        self._lock = threading.Lock()

    @property
    def owners(self) -> int:
        return self._owners

    def acquire(self) -> "SharedHttpClient":
        """Take another reference."""
        with self._lock:
            if self._owners == 0:
                raise RuntimeError("HTTP client is closed")
            self._owners += 1
            return self

    def release(self) -> bool:
        """Drop a reference. Returns True when it was the last one."""
        with self._lock:
            if self._owners == 0:
                return False
            self._owners -= 1
            return self._owners == 0


class Client(ClientExecutor):
    """
    Asynchronous API client.

    ``send`` returns a ResponseFuture; no network I/O happens until it is
    awaited. Clones share the HTTP connection pool and the rate limiter.

    Example:
        async with Client.builder().access_token(key).build() as client:
            account = await Account.get(client)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rate_limiter: Optional[RateLimiter] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        shared_http: Optional[SharedHttpClient] = None
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration, defaults to an anonymous English client
            transport: Optional httpx transport for the underlying HTTP client
            rate_limiter: Shared limiter; created from config.rate_limit when omitted
            http_client: Existing HTTP client; this client takes ownership of it
            shared_http: An already acquired reference to a shared HTTP client
        """
        self.config = config or ClientConfig()
        if shared_http is None:
            shared_http = SharedHttpClient(
                http_client or create_http_client(self.config, transport)
            )
        self._shared_http = shared_http
        self._http = shared_http.http
        self._closed = False

        if rate_limiter is None and self.config.rate_limit:
            rate_limiter = RateLimiter(self.config.rate_limit)
        self._rate_limiter = rate_limiter

    @staticmethod
    def builder():
        """Start building a client."""
        from .builder import ClientBuilder
        return ClientBuilder()

    @property
    def access_token(self) -> Optional[str]:
        return self.config.access_token

    @property
    def language(self) -> Language:
        return self.config.language

    @property
    def rate_limiter(self) -> Optional[RateLimiter]:
        return self._rate_limiter

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    @property
    def closed(self) -> bool:
        return self._closed

    def clone(self) -> "Client":
        """Create a client sharing this client's transport and rate limiter."""
        return Client(
            config=self.config,
            rate_limiter=self._rate_limiter,
            shared_http=self._shared_http.acquire()
        )

    def send(self, request: PendingRequest, target: Any) -> ResponseFuture:
        """
        Prepare a request for execution.

        Args:
            request: The request to execute
            target: Type the response body is decoded into

        Returns:
            ResponseFuture resolving to a value of ``target``
        """
        if self._closed:
            raise RuntimeError("client is closed")

        uri = request.localized_uri(self.language)

        if request.authentication is Authentication.REQUIRED and not self.access_token:
            logger.debug(f"Refusing {uri}: endpoint requires an access token")
            return ResponseFuture.failed(NoAccessTokenError(uri), target, uri)

        async def dispatch() -> httpx.Response:
            if self._rate_limiter is not None:
                await self._rate_limiter.ready()

            http_request = self._http.build_request(
                "GET",
                uri,
                headers=request_headers(request, self.access_token)
            )
            logger.debug(f"GET {uri} (token={mask_token(self.access_token)})")
            return await self._http.send(http_request, stream=True)

        return ResponseFuture.pending(dispatch, target, uri)

    async def aclose(self) -> None:
        """
        Release this client's share of the HTTP client.

        The connection pool is closed once every clone has been closed.
        """
        if self._closed:
            return
        self._closed = True
        if self._shared_http.release():
            await self._http.aclose()
            logger.info("API client closed")

    async def __aenter__(self):
        """Enter async context."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.aclose()
