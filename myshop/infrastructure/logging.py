"""
Logging infrastructure.

Provides logging utilities shared by the service layers and entry points.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

PACKAGE_LOGGERS = ("myshop", "myshop_web")


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    Get logger instance.

    A stream handler with the service log format is installed the first
    time a logger is requested, so repeated calls never duplicate output.

    Args:
        name: Logger name (usually module name)
        level: Log level name (e.g. "INFO", "DEBUG")

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the package loggers once for the process.

    Module loggers under ``myshop`` and ``myshop_web`` propagate to these.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")
    """
    for name in PACKAGE_LOGGERS:
        get_logger(name, level)
