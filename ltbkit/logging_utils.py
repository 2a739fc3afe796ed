"""Setting the log level from a level name."""

from __future__ import annotations

import logging

from ltbkit.error import make_error

__all__ = ["TRACE", "try_setting_log_level"]

TRACE = logging.DEBUG - 5
"""A level finer than DEBUG."""

_OFF = logging.CRITICAL + 10

logging.addLevelName(TRACE, "TRACE")

_LOG_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "err": logging.ERROR,
    "critical": logging.CRITICAL,
    "off": _OFF,
}

_logger = logging.getLogger(__name__)


def try_setting_log_level(log_level: str) -> None:
    """Set the root logger's level by name, e.g. ``"debug"``.

    Raises an :class:`~ltbkit.error.Error` listing the known names when
    ``log_level`` is not one of them.
    """
    level = _LOG_LEVELS.get(log_level)
    if level is None:
        options = "\n".join(_LOG_LEVELS)
        raise make_error(
            f"Unrecognized log level: '{log_level}'\n"
            f"Available options are:\n"
            f"{options}"
        )
    logging.getLogger().setLevel(level)
    _logger.info("Log level: %s", log_level)