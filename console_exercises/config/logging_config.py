"""Logging setup for the console exercises."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """
    Route log records to stderr through rich.

    User-facing output goes to stdout, so diagnostics never interleave with
    the quiz prompts a script might be parsing.

    Args:
        level: Name of the log level (DEBUG, INFO, WARNING, ...)
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(name)s - %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
