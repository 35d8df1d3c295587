"""
Resource Model Base

Pydantic base classes and the endpoint helpers shared by every resource.
"""

from functools import lru_cache
from typing import Any, ClassVar, List

from pydantic import BaseModel, ConfigDict, RootModel, TypeAdapter

from ..exceptions import InvalidArgumentError
from ..protocols import ClientExecutor
from .descriptor import IdParameter, ResourceDescriptor
from .request import PendingRequest, RequestBuilder


class Gw2Model(BaseModel):
    """Base model for API objects. Unknown upstream fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Gw2RootList(RootModel):
    """Base for endpoints whose body is a bare JSON array."""

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index):
        return self.root[index]


@lru_cache(maxsize=None)
def type_adapter(target: Any) -> TypeAdapter:
    """Return a cached TypeAdapter for a decode target."""
    return TypeAdapter(target)


def ensure_executor(client: Any) -> ClientExecutor:
    if not isinstance(client, ClientExecutor):
        raise TypeError(
            f"expected a gw2api client, got {type(client).__name__}"
        )
    return client


class Endpoint:
    """Mixin giving a resource model access to its descriptor."""

    descriptor: ClassVar[ResourceDescriptor]

    @classmethod
    def request(cls) -> RequestBuilder:
        return RequestBuilder(cls.descriptor)

    @classmethod
    def _send(cls, client: Any, request: PendingRequest, target: Any) -> Any:
        return ensure_executor(client).send(request, target)


class SingleEndpoint(Endpoint):
    """Endpoint that returns one document and takes no identifier."""

    @classmethod
    def get(cls, client: Any) -> Any:
        """
        Fetch the resource.

        Args:
            client: A Client or BlockingClient

        Returns:
            An awaitable for Client, the decoded model for BlockingClient
        """
        return cls._send(client, cls.request().build(), cls)


class ListEndpoint(Endpoint):
    """Endpoint addressed by identifier."""

    @classmethod
    def get(cls, client: Any, id: Any) -> Any:
        request = cls.request().ids(IdParameter.single(id)).build()
        return cls._send(client, request, cls)

    @classmethod
    def get_many(cls, client: Any, ids: Any) -> Any:
        """Fetch several objects in one request, in the order the server returns them."""
        request = cls.request().ids(IdParameter.multiple(ids)).build()
        return cls._send(client, request, List[cls])

    @classmethod
    def get_all(cls, client: Any) -> Any:
        if not cls.descriptor.supports_all:
            raise InvalidArgumentError(
                f"{cls.descriptor.uri_template} does not support ids=all"
            )
        request = cls.request().ids(IdParameter.all()).build()
        return cls._send(client, request, List[cls])

    @classmethod
    def ids(cls, client: Any) -> Any:
        """Fetch the list of identifiers the endpoint knows about."""
        return cls._send(client, cls.request().build(), List[cls.descriptor.id_type])
