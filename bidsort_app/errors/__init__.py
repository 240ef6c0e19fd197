"""
Error classification for bid loading and sorting.

Data quality errors are recovered where they are raised (the loader logs them
and returns what it has); system failures propagate to the caller.
"""

from .data_quality import (
    DataQualityError,
    MalformedRowError,
    SourceFileError,
)
from .system_failures import (
    SystemFailureError,
    SortRangeError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedRowError",
    "SourceFileError",
    # System Failures
    "SystemFailureError",
    "SortRangeError",
    "ConfigurationError",
]
