"""
Centralized logging configuration for the bid sorting workbench.

This module provides standardized logging configuration using structlog
for all components. Log output goes to stderr by default so that it never
interleaves with the interactive menu on stdout.
"""
import logging
import sys
from typing import TYPE_CHECKING, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..utils.timing import ElapsedTime


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        stream: Destination stream, defaults to stderr
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_sort_run(
    logger: FilteringBoundLogger,
    algorithm: str,
    size: int,
    elapsed: "ElapsedTime",
    **context
) -> None:
    """
    Log a completed sort run with standardized format.

    Args:
        logger: Structlog logger instance
        algorithm: Name of the sort that ran
        size: Number of bids in the store
        elapsed: Processor time the sort took
        context: Additional context (swap or partition counts)
    """
    logger.info(
        "Sort completed",
        algorithm=algorithm,
        size=size,
        ticks=elapsed.ticks,
        seconds=elapsed.seconds,
        **context
    )
