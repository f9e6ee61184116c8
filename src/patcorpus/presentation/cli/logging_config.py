"""Logging setup for command line runs."""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging.

    - Console output with timestamps and module names
    - Configurable log level for patcorpus modules
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("patcorpus").setLevel(log_level)
