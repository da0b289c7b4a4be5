"""
Logger implementation for the categorical library.

This module provides JSON-formatted logging functionality for the library.
The library logger is silent by default; calling `setup_logger` writes logs
to timestamped files in a 'logs' directory.
"""

import os
import json
import logging
import datetime
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional
import numpy as np

# Name of the library logger
LOGGER_NAME = "categorical"

# Create a custom JSON formatter that can handle numpy values and exact numbers
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""

    def __init__(self):
        super().__init__()

    def _serialize(self, obj: Any) -> Any:
        """Serialize objects to JSON-compatible format."""
        if isinstance(obj, np.ndarray):
            # Convert numpy arrays to lists with limited size
            if obj.size > 100:  # Only show a sample for large arrays
                shape_str = 'x'.join(str(dim) for dim in obj.shape)
                sample = obj.flatten()[:5].tolist()
                return f"ndarray({shape_str}): sample={sample}..."
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, (Fraction, Decimal)):
            # Keep exact weights exact
            return str(obj)
        elif isinstance(obj, (list, tuple)):
            # Handle lists and tuples recursively
            if len(obj) > 100:  # Only show a sample for large lists
                return [self._serialize(item) for item in list(obj)[:5]] + ["..."]
            return [self._serialize(item) for item in obj]
        elif isinstance(obj, dict):
            # Handle dictionaries recursively
            return {str(k): self._serialize(v) for k, v in obj.items()}
        elif hasattr(obj, '__dict__'):
            # For custom objects, convert to dict
            return {
                "__type": obj.__class__.__name__,
                **{k: self._serialize(v) for k, v in obj.__dict__.items()
                   if not k.startswith('_')}
            }
        return obj

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            'timestamp': datetime.datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # Handle the case where the message is already a dict
        if isinstance(record.msg, dict):
            log_data['data'] = self._serialize(record.msg)
        else:
            log_data['message'] = record.getMessage()

            # Add any extra attributes
            if hasattr(record, 'data'):
                log_data['data'] = self._serialize(record.data)

        return json.dumps(log_data, default=str)


# Handler installed by setup_logger
_handler = None

def setup_logger(
    debug: bool = False,
    log_level: str = "info",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up the library logger with the specified configuration.

    Only the first call configures a handler; later calls return the
    already configured logger.

    Args:
        debug: Whether to enable debugging
        log_level: The log level (debug, info, warning, error)
        log_file: Optional custom log file path

    Returns:
        Configured logger instance
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)

    if _handler is not None:
        return logger

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR
    }

    # Set the level based on debug flag and log_level
    if debug:
        logger.setLevel(level_map.get(log_level.lower(), logging.INFO))
    else:
        logger.setLevel(logging.WARNING)  # Minimal logging when debug is False

    logs_dir = os.path.join(os.getcwd(), "logs")

    # Create a timestamped log file if not specified
    if log_file is None:
        os.makedirs(logs_dir, exist_ok=True)
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(logs_dir, f"categorical_{timestamp}.json")
    elif not os.path.isabs(log_file):
        # If relative path, put it in the logs directory
        os.makedirs(logs_dir, exist_ok=True)
        log_file = os.path.join(logs_dir, log_file)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)

    _handler = file_handler

    if debug:
        logger.info({
            "event": "logger_initialized",
            "log_level": log_level,
            "log_file": log_file
        })

    return logger


def get_logger() -> logging.Logger:
    """
    Get the library logger.

    Returns:
        Logger instance
    """
    return logging.getLogger(LOGGER_NAME)


# Helper functions for common logging patterns

def log_construction(kind: str, distribution: Any) -> None:
    """
    Log the construction of a distribution.

    Args:
        kind: How the distribution was built (uniform, weighted, ...)
        distribution: The new distribution
    """
    logger = get_logger()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug({
            "event": "distribution_constructed",
            "kind": kind,
            "distribution": type(distribution).__name__,
            "size": len(distribution)
        })


def log_combination(first: Any, second: Any, result: Any) -> None:
    """
    Log the combination of two distributions.

    Args:
        first: First input distribution
        second: Second input distribution
        result: The combined distribution
    """
    logger = get_logger()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug({
            "event": "distributions_combined",
            "first": {"distribution": type(first).__name__, "size": len(first)},
            "second": {"distribution": type(second).__name__, "size": len(second)},
            "pairs": len(first) * len(second),
            "result": {"distribution": type(result).__name__, "size": len(result)}
        })


def log_rejection(kind: str, reason: str, **details: Any) -> None:
    """
    Log a construction that is about to fail.

    Args:
        kind: The operation that was attempted
        reason: Short machine-readable reason
        **details: Extra context, e.g. the offending outcome and weight
    """
    logger = get_logger()

    if logger.isEnabledFor(logging.DEBUG):
        log_data = {
            "event": "construction_rejected",
            "kind": kind,
            "reason": reason
        }

        if details:
            log_data["details"] = details

        logger.debug(log_data)
