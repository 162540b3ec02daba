"""Logging setup for the clipfrag CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAMESPACE = "clipfrag"


def configure_logging(verbose: bool, console: Console) -> logging.Logger:
    """Route clipfrag log records to the stderr console.

    Args:
        verbose: DEBUG level when True, WARNING otherwise.
        console: Console the handler writes to.

    Returns:
        The configured `clipfrag` namespace logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=verbose,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(name)s: %(message)s" if verbose else "%(message)s"
    ))

    clipfrag_logger = logging.getLogger(LOGGER_NAMESPACE)
    clipfrag_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates on reconfigure
    clipfrag_logger.handlers.clear()
    clipfrag_logger.addHandler(handler)

    # Records must never reach stdout through a root handler
    clipfrag_logger.propagate = False
    return clipfrag_logger
