"""Logging utilities for DataVision.

Shared logging configuration used by the pipeline stages and the CLI.
"""

import logging
import sys
from typing import Optional


def setup_logging(verbose: bool = False, level: Optional[int] = None) -> None:
    """Configure the root logger for DataVision.

    Safe to call more than once; existing handlers are replaced.

    Args:
        verbose: If True, log at DEBUG, otherwise INFO
        level: Optional explicit log level (overrides verbose)
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if level is not None:
        log_level = level
    else:
        log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
