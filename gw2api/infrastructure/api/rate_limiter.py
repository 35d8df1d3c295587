"""
API Rate Limiter

Fixed-window admission gate for outgoing requests.
"""

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from ...core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass
class Ready:
    """Window open until ``until`` with ``remaining`` admissions left."""
    until: float
    remaining: int


@dataclass
class Limited:
    """Admission suspended until the limiter deadline."""
    pass


WindowState = Union[Ready, Limited]


class RateLimiter:
    """
    Limits requests per rolling window.

    A request is admitted only while more than one slot remains in the
    current window, keeping one slot of headroom against the server's
    own accounting. Once the window is exhausted every caller waits for
    the window boundary, after which a fresh window opens.

    The limiter is shared between cloned clients and may be polled from
    several threads.
    """

    DEFAULT_WINDOW = 60.0

    def __init__(
        self,
        limit: int,
        window: float = DEFAULT_WINDOW,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize rate limiter.

        Args:
            limit: Requests allowed per window
            window: Window length in seconds
            clock: Monotonic clock returning seconds
        """
        if limit < 1:
            raise InvalidArgumentError(f"rate limit must be at least 1, got {limit}")

        self._limit = limit
        self._window = window
        self._clock = clock
        self._lock = threading.Lock()

        now = clock()
        self._state: WindowState = Ready(until=now, remaining=limit)
        self._deadline = now

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def window(self) -> float:
        return self._window

    def change(self, limit: int) -> None:
        """Change the limit. The new value applies from the next window."""
        if limit < 1:
            raise InvalidArgumentError(f"rate limit must be at least 1, got {limit}")
        with self._lock:
            self._limit = limit

    def poll_ready(self) -> Optional[float]:
        """
        Try to admit one request.

        Returns:
            None when admitted, otherwise seconds until the window boundary
        """
        with self._lock:
            now = self._clock()
            state = self._state

            if isinstance(state, Ready):
                until, remaining = state.until, state.remaining
                if now >= until:
                    until = now + self._window
                    remaining = self._limit

                if remaining > 1:
                    self._state = Ready(until=until, remaining=remaining - 1)
                    return None

                self._deadline = until
                self._state = Limited()
                return max(until - now, 0.0)

            if now < self._deadline:
                return self._deadline - now

            self._state = Ready(until=now + self._window, remaining=self._limit - 1)
            return None

    async def ready(self) -> None:
        """Wait until a request is admitted."""
        while True:
            wait = self.poll_ready()
            if wait is None:
                return
            logger.debug(f"Rate limit reached, waiting {wait:.2f}s for the next window")
            await asyncio.sleep(wait)

    def status(self) -> Dict[str, Any]:
        """Get rate limiter status."""
        with self._lock:
            now = self._clock()
            state = self._state
            if isinstance(state, Ready):
                return {
                    "limit": self._limit,
                    "window": self._window,
                    "limited": False,
                    "remaining": state.remaining if now < state.until else self._limit,
                    "resets_in": max(state.until - now, 0.0),
                }
            return {
                "limit": self._limit,
                "window": self._window,
                "limited": True,
                "remaining": 0,
                "resets_in": max(self._deadline - now, 0.0),
            }
