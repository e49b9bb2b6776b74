#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging mixin used by EasyRest components.

Classes inherit from ``ModernLogger`` and call ``self.debug(...)``,
``self.info(...)`` etc. directly. Records go through the standard ``logging``
module under the ``easyrest`` namespace and propagate to the host
application's handlers; the library itself only installs a ``NullHandler``.

Loggers are shared per name, so a level applied through ``ModernLogger`` is
process-wide for that component name.
"""

import logging
from typing import Any, Optional, Union

_ROOT_LOGGER_NAME = "easyrest"

logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _resolve_level(level: Union[int, str, None]) -> Optional[int]:
    if level is None:
        return None
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError("Unknown log level: {0}".format(level))
    return resolved


def get_logger(name: str, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Return a logger namespaced under ``easyrest``.

    ``level`` is applied only when given; ``None`` leaves the logger's
    current (usually inherited) level alone.
    """
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = "{0}.{1}".format(_ROOT_LOGGER_NAME, name)
    logger = logging.getLogger(name)
    resolved = _resolve_level(level)
    if resolved is not None:
        logger.setLevel(resolved)
    return logger


class ModernLogger:
    """
    Mixin giving a class its own named logger.
    """

    def __init__(self, name: str, level: Union[int, str, None] = None) -> None:
        self.logger = get_logger(name, level)

    def set_log_level(self, level: Union[int, str]) -> None:
        """Set logging level for every component sharing this logger name."""
        resolved = _resolve_level(level)
        if resolved is not None:
            self.logger.setLevel(resolved)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logger.error(msg, *args, **kwargs)
