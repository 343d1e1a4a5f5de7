"""
Logging setup for the calorie ledger.

All modules log under the ``calorie_ledger`` logger. Console output goes to
stderr so it never mixes with the menu and report lines printed on stdout.
"""

import logging
import sys
from pathlib import Path

from calorie_ledger.utils.parameters import LoggingConfig

APP_LOGGER = "calorie_ledger"


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    """Create the console and file handlers enabled in the configuration."""
    handlers: list[logging.Handler] = []

    if config.console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    return handlers


def reset_logging(logger_name: str = APP_LOGGER) -> None:
    """
    Close and detach every handler on the application logger.

    Args:
        logger_name: Logger to reset.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def setup_logging(config: LoggingConfig, logger_name: str = APP_LOGGER) -> logging.Logger:
    """
    Configure the application logger, replacing handlers from an earlier call.

    Args:
        config: Logging configuration.
        logger_name: Logger to configure.

    Returns:
        Configured logger instance.
    """
    reset_logging(logger_name)

    logger = logging.getLogger(logger_name)
    level = logging.getLevelName(config.level.upper())
    logger.setLevel(level)

    formatter = logging.Formatter(config.format)
    for handler in _build_handlers(config):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (typically ``__name__``)."""
    return logging.getLogger(name)
