"""
Retry Helper

Opt-in retries for transport failures. The client itself never retries.
"""

import logging
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ...core.exceptions import HttpError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def with_retry(
    max_attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 10.0
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorate an async function so HttpError failures are retried.

    The decorated function must build a new request on every call, since a
    response future can only be awaited once. API and decode errors are
    raised immediately.

    Args:
        max_attempts: Total attempts including the first
        min_wait: Minimum backoff in seconds
        max_wait: Maximum backoff in seconds

    Example:
        @with_retry(max_attempts=5)
        async def fetch_build(client):
            return await Build.get(client)
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(HttpError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True
    )
