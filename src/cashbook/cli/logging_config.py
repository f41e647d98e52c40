"""Logging setup for the command-line front end."""

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send cashbook log records to stderr.

    WARNING and above by default, everything with verbose output.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("cashbook")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
