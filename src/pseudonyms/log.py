"""Logging setup for the pseudonyms package."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_HANDLER: Optional[RichHandler] = None


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Route the package's log records through a single Rich handler.

    Calling it again only changes the level.
    """
    global _HANDLER

    package_logger = logging.getLogger("pseudonyms")
    if _HANDLER is None:
        _HANDLER = RichHandler(
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        _HANDLER.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(_HANDLER)
        package_logger.propagate = False

    package_logger.setLevel(level.upper())
    return package_logger
