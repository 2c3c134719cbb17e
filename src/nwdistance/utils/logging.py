from __future__ import annotations

"""Centralized logging helpers."""

import logging
from typing import Final, Optional

_LOGGER_NAME: Final = "nwdistance"


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a ``nwdistance.<component>`` child.

    A level chosen by the application is never overridden.
    """

    name = f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if logger.level == logging.NOTSET:
            logger.setLevel(logging.WARNING)
    return logger
