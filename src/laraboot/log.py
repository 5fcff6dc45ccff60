"""Diagnostic logging for laraboot."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(level: str = "warning", console: Optional[Console] = None) -> None:
    """Route the ``laraboot`` loggers through a rich handler on stderr."""
    logger = logging.getLogger("laraboot")
    logger.setLevel(LEVELS.get(str(level).lower(), logging.WARNING))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
