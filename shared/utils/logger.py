"""
Logging configuration for the validation engine.
"""

import logging
import sys
from typing import Any
from pathlib import Path

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str) -> logging.Logger:
    """
    Setup a logger with consistent formatting.

    Handlers are attached once per logger name: a stdout handler always,
    plus a file handler when LOG_FILE is set.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(settings.LOG_LEVEL)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_to_file:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_function_call(logger: logging.Logger, func_name: str, **kwargs: Any) -> None:
    """
    Log a call and its keyword arguments at DEBUG level.

    Argument formatting is skipped when DEBUG is disabled for the logger.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    args_str = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
    logger.debug(f"Calling {func_name}({args_str})")


def log_error(logger: logging.Logger, error: Exception, context: str = "") -> None:
    """
    Log an error with context.

    The traceback is included only when DEBUG is enabled in settings.

    Args:
        logger: Logger instance
        error: Exception that occurred
        context: Where the error occurred (e.g. the file being loaded)
    """
    prefix = f"{context}: " if context else ""
    logger.error(
        f"{prefix}{type(error).__name__}: {error}",
        exc_info=error if settings.DEBUG else None,
    )
