"""Logging helpers for countries."""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..config import LOG_FORMAT, LOG_LEVEL_ENV

_ROOT_NAME = "countries"
_LOGGER: Optional[logging.Logger] = None


def _level_from_env() -> int:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(raw) if raw else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or its child called *name*.

    The package logger gets a single stream handler the first time it is
    requested.  Its level comes from ``COUNTRIES_LOG_LEVEL`` and defaults to
    ``INFO``.
    """

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger(_ROOT_NAME)
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(_level_from_env())
    if not name or name == _ROOT_NAME:
        return _LOGGER
    if name.startswith(_ROOT_NAME + "."):
        name = name[len(_ROOT_NAME) + 1:]
    return _LOGGER.getChild(name)

logger = get_logger()
