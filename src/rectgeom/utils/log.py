"""Logging helpers.

The package logger only carries a ``NullHandler``; scripts that want output
call :func:`setup_logging` once.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "rectgeom"

_LOGGER_CONFIGURED = False

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a console handler to the package logger (idempotent)."""
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger called ``name``."""
    return logging.getLogger(name)


__all__ = ["PACKAGE_LOGGER", "setup_logging", "get_logger"]
