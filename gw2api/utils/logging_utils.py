"""
Logging helpers for applications using the client

Library modules log through ``logging.getLogger(__name__)`` under the
``gw2api`` namespace and never configure handlers themselves.
"""

import logging
from typing import Optional

ROOT_LOGGER = "gw2api"
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger inside the gw2api namespace

    Args:
        name: Dotted suffix such as "infrastructure.api.client", or a full
            "gw2api." name; the namespace root when omitted
        level: Optional logging level to set on the logger

    Returns:
        Logger instance
    """
    if not name:
        full_name = ROOT_LOGGER
    elif name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        full_name = name
    else:
        full_name = f"{ROOT_LOGGER}.{name}"

    logger = logging.getLogger(full_name)
    if level is not None:
        logger.setLevel(level)
    return logger


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None
) -> logging.Logger:
    """
    Send gw2api log records to a handler

    Repeated calls replace the handler installed by the previous call
    instead of stacking another one.

    Args:
        level: Logging level for the gw2api namespace
        format_string: Custom format string (optional)
        handler: Handler to install, a StreamHandler by default

    Returns:
        The gw2api namespace logger
    """
    logger = get_logger(level=level)

    for existing in list(logger.handlers):
        if getattr(existing, "_gw2api_handler", False):
            logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    handler._gw2api_handler = True
    logger.addHandler(handler)
    return logger


def mask_token(token: Optional[str], visible: int = 4) -> str:
    """
    Mask an access token for log output

    Args:
        token: Access token, or None
        visible: Number of leading characters to keep

    Returns:
        The masked token, or "<none>" when no token is set
    """
    if not token:
        return "<none>"
    if len(token) <= visible:
        return "*" * len(token)
    return token[:visible] + "*" * 8
