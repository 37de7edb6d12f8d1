"""Logging setup for the pathtree CLI.

Library modules only create module-level loggers; handlers are installed
here when the CLI starts.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from pathtree.core.theme import get_theme

# Logger that every pathtree module logger propagates to
PACKAGE_LOGGER = "pathtree"


def get_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level.

    Verbose wins over quiet when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Install a Rich handler on the package logger.

    Calling this again replaces the previously installed handler.

    Args:
        verbose: Enable debug output.
        quiet: Only show warnings and errors.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(theme=get_theme(), stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(get_log_level(verbose, quiet))
    logger.propagate = False
    return logger
