"""Logging setup for the application."""

import logging
import os
import sys


def setup_logger(name: str = "github_browser", log_level: str | None = None) -> logging.Logger:
    """
    Set up and configure a named application logger.

    Output goes to stdout in a single readable line format shared by the
    relay and the CLI. The level is applied to the root logger and named
    loggers inherit it, so calling this again once the configuration is
    loaded re-levels every module logger created at import time.

    Args:
        name: Logger name, usually the caller's __name__
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Falls back to LOG_LEVEL from the environment, then INFO.

    Returns:
        logging.Logger: Configured logger instance
    """
    level_name = (log_level or os.getenv("LOG_LEVEL") or "INFO").upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)

    return logger
