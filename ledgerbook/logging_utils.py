"""Mini README: Application-wide logging helpers for Ledgerbook.

Structure:
    * configure_root_logger - install the shared handler and set verbosity.
    * get_logger - module logger factory that never alters verbosity.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)``. Front ends such as the
    CLI call ``configure_root_logger`` with the level they want; that call is
    the only place the root level changes after the handler is installed.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER: Optional[logging.Handler] = None


def _install_handler(level: int) -> None:
    global _HANDLER
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _HANDLER = handler


def configure_root_logger(level: int = logging.INFO) -> None:
    """Install the ledger log handler once and apply ``level`` to the root logger."""

    if _HANDLER is None:
        _install_handler(level)
    else:
        logging.getLogger().setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module logger, installing the handler on first use only."""

    if _HANDLER is None:
        _install_handler(logging.INFO)
    return logging.getLogger(name)
