"""Logging setup for the console script.

Library modules only create loggers; handlers are attached here, once, by
the entry point.
"""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route ``sta_shell`` log records to stderr through rich."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    # getLevelName maps a known name to its number and anything else to a string.
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logger = logging.getLogger("sta_shell")
    logger.handlers[:] = [handler]
    logger.setLevel(numeric)
    logger.propagate = False
