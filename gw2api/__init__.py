"""
gw2api - Typed Guild Wars 2 API Client

Async and blocking access to the Guild Wars 2 /v2 JSON API.
"""

__version__ = "0.3.0"
__author__ = "gw2api contributors"

# Public API exports
from .core.config import ClientSettings
from .core.exceptions import (
    ErrorKind,
    Gw2ApiError,
    HttpError,
    JsonError,
    ApiError,
    NoAccessTokenError,
    InvalidArgumentError,
    PolledAfterCompletionError,
)
from .core.models import (
    Authentication,
    Language,
    IdParameter,
    PendingRequest,
    RequestBuilder,
    ResourceDescriptor,
)
from .core.protocols import ClientExecutor
from .infrastructure.api import (
    BlockingClient,
    BlockingRuntime,
    Client,
    ClientBuilder,
    ClientConfig,
    RateLimiter,
    ResponseFuture,
    with_retry,
)

__all__ = [
    "ClientSettings",
    "ErrorKind",
    "Gw2ApiError",
    "HttpError",
    "JsonError",
    "ApiError",
    "NoAccessTokenError",
    "InvalidArgumentError",
    "PolledAfterCompletionError",
    "Authentication",
    "Language",
    "IdParameter",
    "PendingRequest",
    "RequestBuilder",
    "ResourceDescriptor",
    "ClientExecutor",
    "BlockingClient",
    "BlockingRuntime",
    "Client",
    "ClientBuilder",
    "ClientConfig",
    "RateLimiter",
    "ResponseFuture",
    "with_retry",
]
