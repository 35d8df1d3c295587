"""
Request Building

Turns a resource descriptor plus call arguments into a pending request.
"""

import string
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import InvalidArgumentError
from .descriptor import (
    Authentication,
    IdParameter,
    Language,
    ResourceDescriptor,
    encode_component,
)


@dataclass(frozen=True)
class PendingRequest:
    """A fully built request, ready to hand to an executor."""
    uri: str
    authentication: Authentication = Authentication.NONE
    localized: bool = False

    def localized_uri(self, language: Language) -> str:
        """Return the URI with the language parameter appended when localized."""
        if not self.localized:
            return self.uri
        separator = "&" if "?" in self.uri else "?"
        return f"{self.uri}{separator}lang={Language(language).value}"


class RequestBuilder:
    """
    Fluent builder for PendingRequest.

    Example:
        RequestBuilder(Color.descriptor).ids(IdParameter.multiple([1, 2])).build()
    """

    def __init__(self, descriptor: ResourceDescriptor):
        self.descriptor = descriptor
        self._path_params: Dict[str, Any] = {}
        self._id_param: Optional[IdParameter] = None
        self._query: List[Tuple[str, Any]] = []
        self._authentication = descriptor.authentication

    def path(self, **params: Any) -> "RequestBuilder":
        """Set values for the placeholders in the URI template."""
        self._path_params.update(params)
        return self

    def ids(self, id_param: Optional[IdParameter]) -> "RequestBuilder":
        self._id_param = id_param
        return self

    def query(self, name: str, value: Any) -> "RequestBuilder":
        """Append an extra query parameter after the id parameter."""
        self._query.append((name, value))
        return self

    def authentication(self, authentication: Authentication) -> "RequestBuilder":
        self._authentication = authentication
        return self

    def _render_path(self) -> str:
        template = self.descriptor.uri_template
        names = [
            field for _, field, _, _ in string.Formatter().parse(template)
            if field is not None
        ]
        missing = [name for name in names if name not in self._path_params]
        if missing:
            raise InvalidArgumentError(
                f"missing path parameters for {template}: {', '.join(missing)}"
            )
        return template.format(**{
            name: encode_component(self._path_params[name]) for name in names
        })

    def build(self) -> PendingRequest:
        uri = self._render_path()

        parts = []
        if self._id_param is not None:
            parts.append(self._id_param.to_query())
        for name, value in self._query:
            parts.append(f"{encode_component(name)}={encode_component(value)}")

        if parts:
            uri = f"{uri}?{'&'.join(parts)}"

        return PendingRequest(
            uri=uri,
            authentication=self._authentication,
            localized=self.descriptor.localized
        )
