"""Default configuration parameters for the bid sorting workbench."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CsvParams:
    """Input file parameters."""
    default_path: str = "eBid_Monthly_Sales_Dec_2016.csv"   # Used when no path is given
    delimiter: str = ","
    encoding: str = "utf-8"
    has_header: bool = True                                  # First row holds column names


@dataclass(frozen=True)
class ColumnParams:
    """0-based column positions of each bid field in a CSV row."""
    title: int = 0
    bid_id: int = 1
    amount: int = 4
    fund: int = 8

    @property
    def required_columns(self) -> int:
        """Minimum number of columns a row needs to be mapped."""
        return max(self.title, self.bid_id, self.amount, self.fund) + 1


@dataclass(frozen=True)
class AmountParams:
    """Currency amount parsing parameters."""
    strip_char: str = "$"          # Currency symbol deleted before conversion
    extra_strip_chars: str = ""    # e.g. "," to accept thousands separators


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    csv: CsvParams
    columns: ColumnParams
    amount: AmountParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        csv=CsvParams(),
        columns=ColumnParams(),
        amount=AmountParams(),
        logging=LoggingParams(),
    )
