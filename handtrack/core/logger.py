"""
Logging setup for the hand position solver

Logs to the console and, optionally, to a rotating file.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import LOG_FILENAME, LOG_MAX_BYTES, LOG_BACKUP_COUNT

LOGGER_NAME = "handtrack"


def setup_logging(debug=False, log_to_file=False, log_path=None):
    """
    Configure and return the package logger

    Args:
        debug: Enable debug-level logging if True
        log_to_file: Also write logs to a rotating file if True
        log_path: Override the log file location (default: ./handtrack.log)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Clear any existing handlers
    logger.handlers.clear()

    detailed_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s.%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    simple_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(simple_format)
    logger.addHandler(console_handler)

    if log_to_file:
        log_path = Path(log_path) if log_path else Path.cwd() / LOG_FILENAME
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_format)
        logger.addHandler(file_handler)

        logger.debug(f"Logging to file: {log_path}")

    return logger


def get_logger(name=None):
    """
    Get a child logger of the package logger

    Args:
        name: Optional name for the child logger

    Returns:
        Logger instance
    """
    base_logger = logging.getLogger(LOGGER_NAME)
    if not name:
        return base_logger
    # module names (__name__) already live under the package logger
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return base_logger.getChild(name)
