"""
Logging infrastructure.

Provides logging utilities for the order service.
"""
import logging
from typing import Union

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def configure_logging(level: Union[int, str] = logging.INFO, name: str = "food_ordering") -> logging.Logger:
    """
    Configure the package logger once (idempotent).

    Args:
        level: Log level name or number
        name: Root logger name of the package

    Returns:
        Configured package logger
    """
    logger = get_logger(name)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
