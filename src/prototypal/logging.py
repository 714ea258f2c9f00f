"""
Logging for the prototypal package.

Every module logs through a child of the "prototypal" logger:

    from prototypal.logging import get_logger
    logger = get_logger(__name__)

The library never installs handlers on import. Demo scripts call
configure_logging() to see what the idioms are doing, most usefully the
warning emitted when a constructor leaks into the global scope.
"""

import logging
import sys
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "prototypal"

LOG_FORMAT = "%(levelname)-7s %(name)s | %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Level names ("DEBUG", "warning") are accepted as well as numbers.
    Calling it again only changes the level and never stacks handlers.
    Records still propagate, so pytest's caplog keeps seeing them.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(h, "_prototypal", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._prototypal = True
        package_logger.addHandler(handler)

    package_logger.setLevel(level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of this package; pass __name__."""
    return logging.getLogger(name)
