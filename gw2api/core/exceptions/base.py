"""
Base Exception Classes

Error taxonomy raised by the request pipeline.
"""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorKind(Enum):
    """Closed set of failure classes a request can end in."""
    HTTP = "http"
    JSON = "json"
    API = "api"
    NO_ACCESS_TOKEN = "no_access_token"


class Gw2ApiError(Exception):
    """Base exception for all request failures."""

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception
        super().__init__(self.message)

    def is_http(self) -> bool:
        return self.kind is ErrorKind.HTTP

    def is_json(self) -> bool:
        return self.kind is ErrorKind.JSON

    def is_api(self) -> bool:
        return self.kind is ErrorKind.API

    def is_no_access_token(self) -> bool:
        return self.kind is ErrorKind.NO_ACCESS_TOKEN

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.__class__.__name__,
            "kind": self.kind.value if self.kind else None,
            "message": self.message,
            "details": self.details
        }


class HttpError(Gw2ApiError):
    """The transport failed to deliver headers or body."""

    kind = ErrorKind.HTTP


class JsonError(Gw2ApiError):
    """A body was not valid JSON or did not match the expected shape."""

    kind = ErrorKind.JSON


class ApiError(Gw2ApiError):
    """The server answered with a non-2xx status and an error body."""

    kind = ErrorKind.API

    def __init__(
        self,
        text: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None
    ):
        super().__init__(
            f"api error: {text}",
            details={"status_code": status_code, "endpoint": endpoint}
        )
        self.text = text
        self.status_code = status_code
        self.endpoint = endpoint


class NoAccessTokenError(Gw2ApiError):
    """An authenticated endpoint was requested without an access token."""

    kind = ErrorKind.NO_ACCESS_TOKEN

    def __init__(self, endpoint: Optional[str] = None):
        super().__init__("no access token", details={"endpoint": endpoint})
        self.endpoint = endpoint


class InvalidArgumentError(ValueError):
    """A request was built from arguments that cannot form a valid URI."""
    pass


class PolledAfterCompletionError(RuntimeError):
    """A response future was awaited again after yielding its result."""
    pass
