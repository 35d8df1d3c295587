"""
Core Exceptions

Error taxonomy for the request pipeline.
"""

from .base import (
    ErrorKind,
    Gw2ApiError,
    HttpError,
    JsonError,
    ApiError,
    NoAccessTokenError,
    InvalidArgumentError,
    PolledAfterCompletionError,
)
from .classify import ApiErrorBody, classify_exception, decode_api_error

__all__ = [
    "ErrorKind",
    "Gw2ApiError",
    "HttpError",
    "JsonError",
    "ApiError",
    "NoAccessTokenError",
    "InvalidArgumentError",
    "PolledAfterCompletionError",
    "ApiErrorBody",
    "classify_exception",
    "decode_api_error",
]
