"""Logging setup for ledgerly.

Module loggers use logging.getLogger(__name__); records are rendered by
rich on stderr so they do not interleave with menu output on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Configure the ledgerly logger.

    Args:
        level: Level name from the config file.
        verbose: Force DEBUG regardless of the configured level.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("ledgerly")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else level.upper())
    logger.propagate = False
