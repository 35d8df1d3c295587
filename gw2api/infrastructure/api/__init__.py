"""
API Infrastructure

HTTP clients, response handling, rate limiting and retries.
"""

from .base_client import ClientConfig, SCHEMA_VERSION
from .rate_limiter import RateLimiter, Ready, Limited
from .response import ResponseFuture, AwaitingHeaders, AwaitingBody, Done
from .client import Client
from .blocking import BlockingClient, BlockingRuntime
from .builder import ClientBuilder
from .retry import with_retry

__all__ = [
    "ClientConfig",
    "SCHEMA_VERSION",
    "RateLimiter",
    "Ready",
    "Limited",
    "ResponseFuture",
    "AwaitingHeaders",
    "AwaitingBody",
    "Done",
    "Client",
    "BlockingClient",
    "BlockingRuntime",
    "ClientBuilder",
    "with_retry",
]
