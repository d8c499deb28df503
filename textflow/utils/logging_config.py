"""Rich-based logging setup for applications embedding the engine."""

import logging
import os
from typing import Iterable, Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "textflow"


def configure_logging(
    level: Optional[str] = None,
    debug_modules: Optional[Iterable[str]] = None,
    force_terminal: bool = False,
) -> Console:
    """Configure logging with a Rich handler.

    Everything outside the package stays at WARNING; the package logger
    uses ``level`` (falling back to the LOG_LEVEL env var, then INFO).

    Args:
        level: Log level name for the ``textflow`` logger
        debug_modules: Extra logger names to set to DEBUG
        force_terminal: Force terminal colour codes

    Returns:
        The Console the handler writes to
    """
    console = Console(force_terminal=force_terminal, stderr=True)
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=True,
    )

    # Silence everything by default
    logging.basicConfig(level=logging.WARNING, format="%(message)s", handlers=[rich_handler], force=True)

    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)
    for module_name in debug_modules or ():
        logging.getLogger(module_name).setLevel(logging.DEBUG)

    return console
