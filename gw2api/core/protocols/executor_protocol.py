"""
Client Executor Interface

Contract shared by the async and blocking clients.
"""

from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.request import PendingRequest

SEALED_PACKAGE = "gw2api"


class ClientExecutor(ABC):
    """
    Executes pending requests and decodes the result into a target type.

    Only classes defined inside the gw2api package may implement this
    interface; resource helpers rely on the two known execution modes.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        module = cls.__module__ or ""
        if module != SEALED_PACKAGE and not module.startswith(SEALED_PACKAGE + "."):
            raise TypeError(
                f"{cls.__qualname__} cannot implement ClientExecutor outside {SEALED_PACKAGE}"
            )

    @abstractmethod
    def send(self, request: "PendingRequest", target: Any) -> Any:
        """
        Execute a request.

        Args:
            request: The request to execute
            target: Type the response body is decoded into

        Returns:
            A ResponseFuture (async client) or the decoded value (blocking client)
        """
        ...
