"""Mini README: Logging set-up shared by every Flightnet module.

Structure:
    * get_logger - returns ``logging.getLogger(name)`` after making sure a
      root handler exists.
    * configure_root_logger - installs the handler, or only changes the
      level when it is already installed.

Usage:
    Modules keep ``LOGGER = get_logger(__name__)``. The CLI calls
    ``configure_root_logger`` before starting the server. Building several
    applications in one process (as the test-suite does) still leaves a
    single handler on the root logger.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach the Flightnet stream handler once; later calls only adjust the level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, configuring the root handler on first use."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
