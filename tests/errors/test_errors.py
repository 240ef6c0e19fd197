"""
Error classification tests.

Covers the recoverable/unrecoverable split and the context each error carries.
"""

from bidsort_app.errors import (
    ConfigurationError,
    DataQualityError,
    MalformedRowError,
    SortRangeError,
    SourceFileError,
    SystemFailureError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors are recoverable."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        row_error = MalformedRowError("short row", row_number=3, column_count=2, required_columns=9)
        assert isinstance(row_error, DataQualityError)
        assert row_error.recoverable is True
        assert row_error.required_columns == 9

        file_error = SourceFileError("missing", path="bids.csv", context={"attempt": 1})
        assert isinstance(file_error, DataQualityError)
        assert file_error.path == "bids.csv"
        assert file_error.context == {"attempt": 1}

    def test_system_failure_error_hierarchy(self):
        """Test that system failures are not recoverable."""
        range_error = SortRangeError("bad range", begin=0, end=9, size=3)
        assert isinstance(range_error, SystemFailureError)
        assert range_error.recoverable is False
        assert (range_error.begin, range_error.end, range_error.size) == (0, 9, 3)

        config_error = ConfigurationError("invalid", errors=["x"])
        assert config_error.recoverable is False
        assert config_error.errors == ["x"]

    def test_messages(self):
        assert str(SortRangeError("bad range")) == "bad range"
        assert str(MalformedRowError("short row")) == "short row"
