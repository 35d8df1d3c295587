"""
Core Configuration

Settings for building API clients.
"""

from .settings import API_BASE_URL, ClientSettings, get_settings

__all__ = [
    "API_BASE_URL",
    "ClientSettings",
    "get_settings",
]
