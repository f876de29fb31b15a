"""Logging helpers for rationax.

The library stays silent by default: no handlers are installed and the root logger is never
configured. enable_console_logging() attaches a single named console handler on demand.
"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "rationax"
_CONSOLE_HANDLER_NAME = "rationax_console"
_DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def enable_console_logging(
    enabled: bool = True,
    *,
    level: int = logging.DEBUG,
    fmt: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Attach/remove a StreamHandler on the rationax logger without touching root logging.

    Args:
        enabled (bool, optional): Attach the handler if True, remove it if False. Defaults to True.
        level (int, optional): Level of the rationax logger while the handler is attached.
            Defaults to logging.DEBUG.
        fmt (str, optional): Format string of the console handler.

    Returns:
        logging.Logger: The rationax package logger.
    """
    logger = get_logger()

    existing: Optional[logging.Handler] = None
    for h in logger.handlers:
        if getattr(h, "name", None) == _CONSOLE_HANDLER_NAME:
            existing = h
            break

    if not enabled:
        if existing is not None:
            logger.removeHandler(existing)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
        return logger

    if existing is None:
        handler = logging.StreamHandler()
        handler.name = _CONSOLE_HANDLER_NAME
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    else:
        existing.setFormatter(logging.Formatter(fmt))

    logger.setLevel(level)
    # Prevent double-printing if the application configured root handlers.
    logger.propagate = False
    return logger
