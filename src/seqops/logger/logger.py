"""Logging for the seqops package.

One handler is attached to the top-level ``seqops`` logger. Modules obtain a
child logger with :func:`get_logger` (``get_logger(__name__)``); child records
propagate to the package logger and share its handler and level.
"""

import logging
import sys

from seqops.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]

PACKAGE_LOGGER = "seqops"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | int | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to ``name`` unless it already has one.

    Args:
        name: Logger name. Defaults to the package logger.
        level: Level name (``"debug"``, ``"INFO"``...) or number.
            Defaults to ``SEQOPS_LOG_LEVEL``.
        format_string: Record format. Defaults to ``DEFAULT_FORMAT``.

    Returns:
        The configured logger. A logger that already has handlers is returned
        untouched.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = level if level is not None else settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {level!r}.")

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger for module ``name``.

    Names outside the package namespace are nested under it, so
    ``get_logger("scratch")`` returns ``seqops.scratch``.
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


logger = setup_logger()
