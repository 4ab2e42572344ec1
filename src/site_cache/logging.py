"""Logging setup for site_cache.

Modules get their logger through ``get_logger(__name__)``. Applications
call ``setup_logging()`` once at startup; the library itself never
configures handlers on import.
"""

import logging
import sys

from site_cache.config import settings

_LOGGING_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)-32s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> None:
    """Configure the ``site_cache`` logger hierarchy.

    Args:
        level: Log level name. Defaults to settings.log_level.
    """
    global _LOGGING_CONFIGURED

    root = logging.getLogger("site_cache")
    root.setLevel((level or settings.log_level).upper())

    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.propagate = False

    _LOGGING_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(name)
