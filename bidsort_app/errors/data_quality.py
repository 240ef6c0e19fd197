"""
Data quality error classifications for bid file ingestion.

These exceptions describe problems with the input file itself. They are
always recoverable: loading stops or skips and the caller keeps whatever
bids were built so far.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedRowError(DataQualityError):
    """A CSV row has fewer columns than the configured column mapping needs."""

    def __init__(self, message: str, row_number: Optional[int] = None,
                 column_count: Optional[int] = None,
                 required_columns: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.row_number = row_number
        self.column_count = column_count
        self.required_columns = required_columns


class SourceFileError(DataQualityError):
    """The bid file is missing or cannot be read."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
