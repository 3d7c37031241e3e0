"""Logging setup keyed by the ``-dbglvl`` value.

Handlers are attached to the ``slim_predict`` package logger only, so
embedding applications keep control of the root logger.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER: str = "slim_predict"


def level_for_debug(debug_level: int) -> int:
    """Map a non-negative ``-dbglvl`` to a :mod:`logging` level."""
    if debug_level <= 0:
        return logging.WARNING
    if debug_level == 1:
        return logging.INFO
    return logging.DEBUG


def _make_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s")
        )
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False, markup=False)


def configure_logging(debug_level: int) -> logging.Logger:
    """Set the package logger level and install a single handler.

    Safe to call more than once; an existing handler is reused.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level_for_debug(debug_level))
    if not logger.handlers:
        logger.addHandler(_make_handler())
    return logger
