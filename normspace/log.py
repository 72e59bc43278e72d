"""Logging helpers for normspace.

Modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves. Applications that want the package's output on
stderr call ``get_logger()`` once.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import get_settings

PACKAGE_LOGGER = "normspace"


def get_logger(name: str = PACKAGE_LOGGER, level: Optional[int] = None) -> logging.Logger:
    """Return a configured logger with a concise formatter.

    Idempotent: installs at most one StreamHandler, marked by
    ``_normspace_handler``.
    """
    if level is None:
        level = get_settings().log_level
    logger = logging.getLogger(name)
    logger.setLevel(int(level))

    has_handler = any(getattr(h, "_normspace_handler", False) for h in logger.handlers)
    if not has_handler:
        handler = logging.StreamHandler()
        handler._normspace_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(name)s %(levelname)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    return logger
