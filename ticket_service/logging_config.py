"""
logging_config.py — Centralized Logging Configuration for the Ticket Service

This module configures unified logging behavior for the entire application.
It ensures that all modules log messages consistently to console and, optionally, to a file.

Features:
    • Combined console and file logging output
    • Process ID tagging for multi-process visibility
    • Standardized log format for all modules
    • Reduced verbosity for external dependencies (httpx, grpc)

Environment:
    LOG_LEVEL: Log level name (default: INFO).
    LOG_FILE: Path of the log file (default: 'ticket_purchases.log'). Empty disables file output.
"""

import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(message)s'
NOISY_LOGGERS = ("httpx", "httpcore", "grpc")


def setup_logging(level=None, log_file=None):
    """
    Configures the global logging system for the application.

    Args:
        level (str | None): Log level name. Falls back to LOG_LEVEL, then INFO.
        log_file (str | None): Log file path. Falls back to LOG_FILE, then
            'ticket_purchases.log'. An empty string disables file output.
    """
    level = level or os.environ.get("LOG_LEVEL", "INFO")
    if log_file is None:
        log_file = os.environ.get("LOG_FILE", "ticket_purchases.log")

    # Console output (stdout, Docker-compatible)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, handlers=handlers)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name):
    """
    Returns a logger instance for a given module or component name.

    Args:
        name (str): The logger name, typically the module's __name__.

    Returns:
        logging.Logger: A logger that follows the global format and handlers.
    """
    return logging.getLogger(name)
