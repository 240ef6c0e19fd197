"""
Logging configuration and utilities for the bid sorting workbench.
"""
from .config import configure_logging, get_logger, log_sort_run

__all__ = ["configure_logging", "get_logger", "log_sort_run"]
