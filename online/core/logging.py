import sys
from loguru import logger

"""
Logging setup for the Mutual Fund Generator.

Library modules import ``logger`` from loguru directly and never touch sinks.
Call ``configure_logging`` once at the command-line entry point.
"""

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def configure_logging(level: str = "INFO") -> None:
    """
    Replaces loguru's default stderr sink with one at the requested level.

    Args:
        level (str): Minimum level name, e.g. "DEBUG" or "warning".
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    logger.debug(f"Logging configured at level {level.upper()}")
