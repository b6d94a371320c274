"""Logging setup for auto-seedr."""

from __future__ import annotations

import logging
import os

from auto_seedr.config import LOG_LEVEL_ENV

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_ROOT_LOGGER_NAME = "auto_seedr"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or logging.WARNING
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        # getLevelName returns "Level X" for unknown names.
        return resolved if isinstance(resolved, int) else logging.WARNING
    return level


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Priority for the level:
        1. Explicit ``level`` argument.
        2. The AUTO_SEEDR_LOG_LEVEL environment variable.
        3. WARNING.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    if not any(getattr(h, "_auto_seedr", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._auto_seedr = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
