"""
Core Protocols

Interfaces implemented by the infrastructure layer.
"""

from .executor_protocol import ClientExecutor

__all__ = [
    "ClientExecutor",
]
