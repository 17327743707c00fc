"""Logging setup for the API process."""

from __future__ import annotations

import logging

_APP_LOGGER = "app"
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Вешает один StreamHandler на логгер "app". Повторный вызов
    только меняет уровень. Неизвестный уровень превращается в INFO.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logger = logging.getLogger(_APP_LOGGER)
    logger.setLevel(resolved)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
