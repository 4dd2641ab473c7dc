"""Logging setup for ibc-xfer.

Diagnostics go to stderr so that stdout carries only the final report.
Rich is used for the handler when it is installed; otherwise a plain
``StreamHandler`` is attached.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME: str = "ibc_xfer"

LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ),
        )
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def setup_logger(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure and return the package logger.

    Idempotent: a second call only adjusts the level.
    """
    if isinstance(level, str):
        level = LEVELS.get(level.lower(), logging.WARNING)

    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    if not log.handlers:
        log.addHandler(_build_handler())
    return log
