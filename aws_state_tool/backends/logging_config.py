"""
Logging configuration for the backends and their commands.

Verbosity is driven by the repeated -v flag on every command:
0 = WARNING, 1 = INFO, 2 = DEBUG, 3+ = DEBUG including boto3/botocore.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Chatty third-party loggers that only speak up at -vvv
LIBRARY_LOGGERS = ("boto3", "botocore", "urllib3", "s3transfer")


def setup_logging(verbose_count: int = 0) -> None:
    """
    Configure logging based on verbosity count.

    Args:
        verbose_count: Number of -v flags passed on the command line
    """
    if verbose_count <= 0:
        level = logging.WARNING
    elif verbose_count == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    library_level = logging.DEBUG if verbose_count >= 3 else logging.WARNING
    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name, usually __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
