"""
Core Models

Descriptors, request building and model bases.
"""

from .descriptor import (
    Authentication,
    Language,
    IdKind,
    IdParameter,
    ResourceDescriptor,
    encode_component,
)
from .request import PendingRequest, RequestBuilder
from .base import (
    Gw2Model,
    Gw2RootList,
    Endpoint,
    SingleEndpoint,
    ListEndpoint,
    ensure_executor,
    type_adapter,
)

__all__ = [
    "Authentication",
    "Language",
    "IdKind",
    "IdParameter",
    "ResourceDescriptor",
    "encode_component",
    "PendingRequest",
    "RequestBuilder",
    "Gw2Model",
    "Gw2RootList",
    "Endpoint",
    "SingleEndpoint",
    "ListEndpoint",
    "ensure_executor",
    "type_adapter",
]
