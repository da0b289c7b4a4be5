"""
Logging module for the categorical library.

This module provides JSON-formatted logging functionality for the library.
"""

from categorical.logging.logger import (
    JsonFormatter,
    setup_logger,
    get_logger,
    log_construction,
    log_combination,
    log_rejection,
)

__all__ = [
    "JsonFormatter",
    "setup_logger",
    "get_logger",
    "log_construction",
    "log_combination",
    "log_rejection",
]
