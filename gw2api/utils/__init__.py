"""
Utilities
"""

from .logging_utils import get_logger, setup_logging, mask_token

__all__ = [
    "get_logger",
    "setup_logging",
    "mask_token",
]
