"""
System failure error classifications for unrecoverable errors.

These exceptions signal programming or setup mistakes (an out-of-bounds sort
range, an invalid configuration) rather than bad input data.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class SortRangeError(SystemFailureError):
    """Sort requested over an index range outside the store bounds."""

    def __init__(self, message: str, begin: Optional[int] = None,
                 end: Optional[int] = None, size: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.begin = begin
        self.end = end
        self.size = size


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
