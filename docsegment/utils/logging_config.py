"""
Logging Configuration Module for the Document Segmentation Engine

Configures loguru for console and rotating file output under logs/.
Library code only binds named loggers via get_logger(); sinks are installed
by entry points (scripts) through setup_logger().

Key Functions:
- setup_logger: Install console and (optionally) file sinks
- get_logger: Logger bound to a component name
- log_step_start / log_step_complete: Run banners with section counts
"""

import sys
from datetime import datetime
from typing import Any, Optional
from loguru import logger as _logger

from docsegment.config import (
    LOG_LEVEL,
    LOGS_DIR,
)


# File format: Full timestamp with source location
FILE_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

# Console format: Short timestamp without source location
CONSOLE_LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"

BANNER = "=" * 80


def setup_logger(level: Optional[str] = None, log_to_file: bool = True) -> Any:
    """
    Configure loguru logger for a segmentation run.

    Always logs to stderr. With log_to_file, also creates:
    1. segmentation_{timestamp}.log - All messages (10MB rotation, keep 10 files)
    2. errors_{timestamp}.log - Error/Critical only, which is where the
       segmenter's contained exceptions end up (5MB rotation, keep 20 files)

    Args:
        level: Minimum level for console and run log (defaults to LOG_LEVEL)
        log_to_file: Whether to add the file sinks under LOGS_DIR

    Returns:
        Configured loguru logger instance

    Example:
        >>> from docsegment.utils.logging_config import setup_logger
        >>> logger = setup_logger(level="DEBUG", log_to_file=False)
        >>> logger.debug("Chapter located")
    """
    level = (level or LOG_LEVEL).upper()

    # Remove default handler to avoid duplicate logs
    _logger.remove()

    _logger.add(
        sys.stderr,
        format=CONSOLE_LOG_FORMAT,
        level=level,
        colorize=True,
    )

    if not log_to_file:
        return _logger

    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    run_log = LOGS_DIR / f"segmentation_{timestamp}.log"
    _logger.add(
        run_log,
        format=FILE_LOG_FORMAT,
        level=level,
        rotation="10 MB",
        retention=10,
        compression="zip",
        enqueue=True,
    )

    error_log = LOGS_DIR / f"errors_{timestamp}.log"
    _logger.add(
        error_log,
        format=FILE_LOG_FORMAT,
        level="ERROR",
        rotation="5 MB",
        retention=20,
        compression="zip",
        enqueue=True,
    )

    _logger.info(f"Segmentation log: {run_log}")
    _logger.info(f"Error log: {error_log}")

    return _logger


def get_logger(name: str) -> Any:
    """
    Get a logger bound to a component name (e.g. "segmenter", "outline").

    The name is available to sinks as record["extra"]["name"].
    """
    return _logger.bind(name=name)


def log_step_start(step_name: str) -> None:
    """
    Log the start banner of a segmentation run.

    Args:
        step_name: Name of the run (e.g., "Segmenting report.txt")
    """
    _logger.info(BANNER)
    _logger.info(f"STARTING: {step_name}")
    _logger.info(BANNER)


def log_step_complete(step_name: str, duration: float, section_count: Optional[int] = None) -> None:
    """
    Log the completion banner of a segmentation run.

    Args:
        step_name: Name of the run
        duration: Duration in seconds (use time.time() difference)
        section_count: Number of sections extracted, if known. Zero is
            logged as a warning since the outline matched nothing.
    """
    _logger.success(f"COMPLETED: {step_name}")

    if section_count is not None:
        if section_count == 0:
            _logger.warning("Sections extracted: 0")
        else:
            _logger.info(f"Sections extracted: {section_count}")

    _logger.info(f"Duration: {duration:.2f} seconds")
    _logger.info(BANNER)


# Export the logger instance for direct use
logger = _logger


__all__ = [
    "setup_logger",
    "get_logger",
    "log_step_start",
    "log_step_complete",
    "logger",
]
