"""
Resource Descriptors

Static per-endpoint declarations consumed by the request builder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Tuple
from urllib.parse import quote

from ..exceptions import InvalidArgumentError


class Authentication(Enum):
    """Whether an endpoint needs the access token."""
    NONE = "none"
    OPTIONAL = "optional"
    REQUIRED = "required"


class Language(str, Enum):
    """Languages the API localizes text into."""
    EN = "en"
    ES = "es"
    DE = "de"
    FR = "fr"
    ZH = "zh"

    def __str__(self) -> str:
        return self.value


class IdKind(Enum):
    ALL = "all"
    SINGLE = "single"
    MULTIPLE = "multiple"


def encode_component(value: Any) -> str:
    """Percent-encode a single URI path or query component."""
    return quote(str(value), safe="")


@dataclass(frozen=True)
class IdParameter:
    """
    Identifier selection for a list endpoint.

    Use the ``all``, ``single`` and ``multiple`` constructors rather than
    instantiating directly.
    """
    kind: IdKind
    ids: Tuple[Any, ...] = ()

    @classmethod
    def all(cls) -> "IdParameter":
        return cls(IdKind.ALL)

    @classmethod
    def single(cls, id: Any) -> "IdParameter":
        return cls(IdKind.SINGLE, (id,))

    @classmethod
    def multiple(cls, ids: Iterable[Any]) -> "IdParameter":
        if isinstance(ids, (str, bytes)):
            raise InvalidArgumentError(
                f"expected a collection of ids, got {type(ids).__name__} {ids!r}"
            )
        ids = tuple(ids)
        if not ids:
            raise InvalidArgumentError("at least one id is required")
        return cls(IdKind.MULTIPLE, ids)

    def to_query(self) -> str:
        """Render the parameter as a query string fragment."""
        if self.kind is IdKind.ALL:
            return "ids=all"
        if self.kind is IdKind.SINGLE:
            return f"id={encode_component(self.ids[0])}"
        return "ids=" + ",".join(encode_component(id) for id in self.ids)

    def __str__(self) -> str:
        return self.to_query()


@dataclass(frozen=True)
class ResourceDescriptor:
    """Declaration of one remote endpoint family."""
    uri_template: str
    authentication: Authentication = Authentication.NONE
    localized: bool = False
    id_type: Optional[type] = None
    supports_all: bool = False

    @property
    def is_list(self) -> bool:
        return self.id_type is not None
