"""
Blocking API Client

Synchronous facade that drives the async pipeline on a private event loop.
"""

import asyncio
import logging
import threading
import weakref
from typing import Any, Awaitable, Optional, TypeVar

import httpx

from ...core.models import Language, PendingRequest
from ...core.protocols import ClientExecutor
from .base_client import ClientConfig
from .client import Client
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _discard(awaitable: Awaitable[Any]) -> None:
    if asyncio.iscoroutine(awaitable):
        awaitable.close()


def _in_running_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class BlockingRuntime:
    """
    A dedicated event loop that runs awaitables to completion.

    Calls are serialized by a lock so one runtime can be shared by clients
    used from several threads. The runtime is reference counted: each
    owner calls ``release`` once and the loop is closed with the last one.
    Must not be used from inside a running loop.
    """

    def __init__(self):
        self._loop = asyncio.new_event_loop()
        self._lock = threading.Lock()
        self._owners = 1
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def owners(self) -> int:
        return self._owners

    def acquire(self) -> "BlockingRuntime":
        """Take another reference to the runtime."""
        with self._lock:
            if self._closed:
                raise RuntimeError("blocking runtime is closed")
            self._owners += 1
            return self

    def release(self) -> None:
        """Drop a reference, closing the loop when none remain."""
        with self._lock:
            if self._closed:
                return
            self._owners -= 1
            if self._owners > 0:
                return
        self.close()

    def block_on(self, awaitable: Awaitable[T]) -> T:
        """Run an awaitable on the runtime loop and return its result."""
        if _in_running_loop():
            _discard(awaitable)
            raise RuntimeError(
                "blocking client cannot be used from inside a running event loop; "
                "use the async Client instead"
            )

        async def run():
            return await awaitable

        with self._lock:
            if self._closed:
                _discard(awaitable)
                raise RuntimeError("blocking runtime is closed")
            return self._loop.run_until_complete(run())

    def close(self) -> None:
        """Close the loop regardless of remaining owners."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._owners = 0
            try:
                if not _in_running_loop():
                    self._loop.run_until_complete(self._loop.shutdown_asyncgens())
            finally:
                self._loop.close()
            logger.debug("Blocking runtime closed")


def _release_client(runtime: BlockingRuntime, inner: Client) -> None:
    try:
        if not runtime.closed and not _in_running_loop():
            runtime.block_on(inner.aclose())
    finally:
        runtime.release()


class BlockingClient(ClientExecutor):
    """
    Synchronous API client.

    ``send`` blocks until the request completes and returns the decoded
    value or raises the classified error. Clones share the runtime, the
    HTTP connection pool and the rate limiter; both are closed when the
    last clone is closed or garbage collected.

    Example:
        with Client.builder().build_blocking() as client:
            build = Build.get(client)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rate_limiter: Optional[RateLimiter] = None,
        runtime: Optional[BlockingRuntime] = None,
        inner: Optional[Client] = None
    ):
        # runtime and inner are owned references; close() releases both
        self._runtime = runtime or BlockingRuntime()
        self._inner = inner or Client(config, transport=transport, rate_limiter=rate_limiter)
        self._finalizer = weakref.finalize(self, _release_client, self._runtime, self._inner)

    @property
    def config(self) -> ClientConfig:
        return self._inner.config

    @property
    def access_token(self) -> Optional[str]:
        return self._inner.access_token

    @property
    def language(self) -> Language:
        return self._inner.language

    @property
    def rate_limiter(self) -> Optional[RateLimiter]:
        return self._inner.rate_limiter

    @property
    def runtime(self) -> BlockingRuntime:
        return self._runtime

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def clone(self) -> "BlockingClient":
        return BlockingClient(runtime=self._runtime.acquire(), inner=self._inner.clone())

    def send(self, request: PendingRequest, target: Any) -> Any:
        """Execute a request and return the decoded value."""
        return self._runtime.block_on(self._inner.send(request, target))

    def close(self) -> None:
        """Release this client's share of the HTTP client and the runtime."""
        self._finalizer()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
