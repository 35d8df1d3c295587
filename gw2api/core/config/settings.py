"""
Client Settings

Environment-backed configuration for building clients.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.descriptor import Language

API_BASE_URL = "https://api.guildwars2.com"


class ClientSettings(BaseSettings):
    """Client configuration read from GW2_* environment variables."""

    access_token: Optional[str] = Field(
        default=None,
        description="API key or subtoken sent as a bearer token"
    )
    language: Language = Field(
        default=Language.EN,
        description="Language for localized endpoints"
    )
    base_url: str = Field(
        default=API_BASE_URL,
        description="API host"
    )
    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )
    rate_limit: Optional[int] = Field(
        default=None,
        description="Max requests per minute, unlimited when unset"
    )

    model_config = SettingsConfigDict(
        env_prefix="GW2_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("access_token", mode="before")
    @classmethod
    def empty_token_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("rate_limit")
    @classmethod
    def validate_rate_limit(cls, v):
        if v is not None and v < 1:
            raise ValueError(f"Invalid rate limit: {v}. Must be at least 1")
        return v


def get_settings() -> ClientSettings:
    """Load settings from the environment."""
    return ClientSettings()
