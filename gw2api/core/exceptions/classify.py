"""
Error Classification

Maps transport, decode and API failures onto the error taxonomy.
"""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

from .base import Gw2ApiError, HttpError, JsonError, ApiError

logger = logging.getLogger(__name__)


class ApiErrorBody(BaseModel):
    """Body the API sends alongside a non-2xx status."""

    text: str


def classify_exception(
    exc: Exception,
    endpoint: Optional[str] = None
) -> Gw2ApiError:
    """
    Classify an exception raised while executing a request.

    Args:
        exc: Exception raised by httpx or pydantic
        endpoint: Request URI, recorded in the error details

    Returns:
        The matching taxonomy error, with the original attached
    """
    if isinstance(exc, Gw2ApiError):
        return exc

    details = {"endpoint": endpoint}

    if isinstance(exc, ValidationError):
        details["errors"] = exc.error_count()
        return JsonError(
            f"failed to decode response: {exc}",
            details=details,
            original_exception=exc
        )

    if isinstance(exc, httpx.TimeoutException):
        details["reason"] = "timeout"
    elif isinstance(exc, httpx.NetworkError):
        details["reason"] = "network"
    elif isinstance(exc, httpx.DecodingError):
        details["reason"] = "decoding"

    return HttpError(
        f"http error: {exc}",
        details=details,
        original_exception=exc
    )


def decode_api_error(
    body: bytes,
    status_code: Optional[int] = None,
    endpoint: Optional[str] = None
) -> Gw2ApiError:
    """
    Decode the body of a non-2xx response.

    Args:
        body: Raw response body
        status_code: HTTP status of the response
        endpoint: Request URI

    Returns:
        ApiError when the body carries a text message, JsonError otherwise
    """
    try:
        payload = ApiErrorBody.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Undecodable error body from {endpoint} (status {status_code})")
        return classify_exception(e, endpoint)

    logger.warning(f"API error from {endpoint} (status {status_code}): {payload.text}")
    return ApiError(payload.text, status_code=status_code, endpoint=endpoint)
