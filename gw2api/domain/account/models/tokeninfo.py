"""
Token Info Model

Metadata about the access token the client is using.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field, field_serializer

from ....core.models import Authentication, Gw2Model, ResourceDescriptor, SingleEndpoint


class TokenPermission(str, Enum):
    ACCOUNT = "account"
    BUILDS = "builds"
    CHARACTERS = "characters"
    GUILDS = "guilds"
    INVENTORIES = "inventories"
    PROGRESSION = "progression"
    PVP = "pvp"
    TRADINGPOST = "tradingpost"
    UNLOCKS = "unlocks"
    WALLET = "wallet"


class TokenKind(str, Enum):
    API_KEY = "APIKey"
    SUBTOKEN = "Subtoken"


class TokenInfo(Gw2Model, SingleEndpoint):
    """
    Token metadata.

    ``expires_at``, ``issued_at`` and ``urls`` are only set for subtokens.
    """

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/tokeninfo", authentication=Authentication.REQUIRED
    )

    id: str
    name: str
    permissions: FrozenSet[TokenPermission]
    kind: TokenKind = Field(alias="type")
    expires_at: Optional[datetime] = None
    issued_at: Optional[datetime] = None
    urls: Optional[List[str]] = None

    @field_serializer("permissions")
    def serialize_permissions(self, permissions: FrozenSet[TokenPermission]) -> List[str]:
        return [permission.value for permission in TokenPermission if permission in permissions]

    def has_permission(self, permission: TokenPermission) -> bool:
        return permission in self.permissions
