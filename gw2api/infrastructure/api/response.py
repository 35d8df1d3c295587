"""
Response Future

Lazily driven state machine for one in-flight request.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generator, Generic, Optional, TypeVar, Union

import httpx
from pydantic import ValidationError

from ...core.exceptions import (
    Gw2ApiError,
    PolledAfterCompletionError,
    classify_exception,
    decode_api_error,
)
from ...core.models import type_adapter

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class AwaitingHeaders:
    """Request not yet dispatched. ``dispatch`` sends it and yields the headers."""
    dispatch: Callable[[], Awaitable[httpx.Response]]


@dataclass
class AwaitingBody:
    """Headers received, body still streaming."""
    response: httpx.Response
    is_error: bool


@dataclass
class Done:
    """Terminal state holding either a value or an error."""
    value: Any = None
    error: Optional[Gw2ApiError] = None
    delivered: bool = False

    def take(self) -> Any:
        if self.delivered:
            raise PolledAfterCompletionError("response future polled after completion")
        self.delivered = True
        if self.error is not None:
            raise self.error
        return self.value


ResponseState = Union[AwaitingHeaders, AwaitingBody, Done]


class ResponseFuture(Generic[T]):
    """
    Awaitable result of ``Client.send``.

    Nothing is sent until the future is awaited. Awaiting drives the
    request through AwaitingHeaders, AwaitingBody and Done, then returns
    the decoded value or raises the classified error. A future yields
    its result once; awaiting it again raises PolledAfterCompletionError.
    """

    def __init__(self, state: ResponseState, target: Any, endpoint: str = ""):
        self._state = state
        self._target = target
        self._endpoint = endpoint
        self._driving = False

    @classmethod
    def pending(
        cls,
        dispatch: Callable[[], Awaitable[httpx.Response]],
        target: Any,
        endpoint: str = ""
    ) -> "ResponseFuture":
        return cls(AwaitingHeaders(dispatch), target, endpoint)

    @classmethod
    def failed(cls, error: Gw2ApiError, target: Any = None, endpoint: str = "") -> "ResponseFuture":
        """Create a future that is already done with an error."""
        return cls(Done(error=error), target, endpoint)

    @property
    def state(self) -> ResponseState:
        return self._state

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def done(self) -> bool:
        return isinstance(self._state, Done)

    async def _advance(self) -> None:
        """Perform exactly one state transition."""
        state = self._state

        if isinstance(state, AwaitingHeaders):
            try:
                response = await state.dispatch()
            except httpx.HTTPError as e:
                logger.debug(f"Transport failure for {self._endpoint}: {e}")
                self._state = Done(error=classify_exception(e, self._endpoint))
                return
            self._state = AwaitingBody(response, is_error=not response.is_success)

        elif isinstance(state, AwaitingBody):
            response = state.response
            try:
                body = await response.aread()
            except httpx.HTTPError as e:
                logger.debug(f"Body read failed for {self._endpoint}: {e}")
                self._state = Done(error=classify_exception(e, self._endpoint))
                return
            finally:
                await response.aclose()
            self._state = self._decode(body, state.is_error, response.status_code)

        else:
            raise PolledAfterCompletionError("response future polled after completion")

    def _decode(self, body: bytes, is_error: bool, status_code: int) -> Done:
        if is_error:
            return Done(error=decode_api_error(body, status_code, self._endpoint))

        try:
            value = type_adapter(self._target).validate_json(body)
        except ValidationError as e:
            logger.warning(f"Failed to decode response from {self._endpoint}: {e.error_count()} error(s)")
            return Done(error=classify_exception(e, self._endpoint))
        return Done(value=value)

    async def _drive(self) -> T:
        if self._driving:
            raise RuntimeError("response future is already being awaited")
        self._driving = True
        try:
            while not isinstance(self._state, Done):
                await self._advance()
        finally:
            self._driving = False
            if not isinstance(self._state, Done):
                await self.aclose()
        return self._state.take()

    def __await__(self) -> Generator[Any, None, T]:
        return self._drive().__await__()

    async def aclose(self) -> None:
        """Abandon the request, closing any streamed response."""
        state = self._state
        if isinstance(state, AwaitingBody):
            await state.response.aclose()
        if not isinstance(state, Done):
            self._state = Done(
                error=classify_exception(
                    httpx.RequestError("request abandoned"), self._endpoint
                ),
                delivered=True
            )

    def __repr__(self) -> str:
        return f"<ResponseFuture {self._endpoint} state={type(self._state).__name__}>"
