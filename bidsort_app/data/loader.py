"""
CSV loading of bid records.

Reads the eBid monthly sales export row by row and maps fixed column
positions onto Bid fields. A malformed row ends the load; a missing file
yields nothing. Either way the error is logged and the bids built so far
are returned, so a bad file is never fatal to the interactive session.
"""

import codecs
import csv
from dataclasses import dataclass, field
from typing import Optional

import structlog

from ..config.defaults import AmountParams, ColumnParams, CsvParams
from ..errors import DataQualityError, MalformedRowError, SourceFileError
from .models import Bid
from .parsers import parse_amount

logger = structlog.get_logger(__name__)


@dataclass
class LoadResult:
    """Outcome of loading a bid file."""
    path: str
    bids: list[Bid] = field(default_factory=list)
    errors: list[DataQualityError] = field(default_factory=list)
    rows_read: int = 0
    amounts_inexact: int = 0    # Amounts that only parsed partially

    @property
    def complete(self) -> bool:
        """True if every row was loaded without error."""
        return not self.errors


def parse_bid_row(
    row: list[str],
    row_number: int,
    columns: ColumnParams,
    amount: AmountParams
) -> tuple[Bid, bool]:
    """
    Build a Bid from one CSV row.

    Args:
        row: Column values of the row
        row_number: 1-based line number in the file, for error reporting
        columns: Column positions of each field
        amount: Amount parsing parameters

    Returns:
        Tuple of (bid, whether the amount parsed exactly)

    Raises:
        MalformedRowError: If the row is too short for the column mapping
    """
    required = columns.required_columns
    if len(row) < required:
        raise MalformedRowError(
            f"Row {row_number} has {len(row)} columns, expected at least {required}",
            row_number=row_number,
            column_count=len(row),
            required_columns=required,
        )

    parsed = parse_amount(row[columns.amount], amount.strip_char, amount.extra_strip_chars)
    bid = Bid(
        bid_id=row[columns.bid_id],
        title=row[columns.title],
        fund=row[columns.fund],
        amount=parsed.value,
    )
    return bid, parsed.exact


def load_bids(
    csv_path: str,
    csv_params: Optional[CsvParams] = None,
    columns: Optional[ColumnParams] = None,
    amount: Optional[AmountParams] = None
) -> LoadResult:
    """
    Load a CSV file containing bids.

    Args:
        csv_path: Path to the CSV file to load
        csv_params: File format parameters, defaults if omitted
        columns: Column positions, defaults if omitted
        amount: Amount parsing parameters, defaults if omitted

    Returns:
        LoadResult holding every bid read before any error
    """
    csv_params = csv_params or CsvParams()
    columns = columns or ColumnParams()
    amount = amount or AmountParams()

    result = LoadResult(path=csv_path)
    logger.info("Loading CSV file", path=csv_path)

    try:
        codecs.lookup(csv_params.encoding)
    except LookupError as e:
        result.errors.append(SourceFileError(f"Cannot read bid file: {e}", path=csv_path))
        logger.error("Unknown bid file encoding", path=csv_path, encoding=csv_params.encoding)
        return result

    try:
        with open(csv_path, newline="", encoding=csv_params.encoding, errors="replace") as f:
            reader = csv.reader(f, delimiter=csv_params.delimiter)

            if csv_params.has_header:
                next(reader, None)

            for row in reader:
                # Blank lines carry no record
                if not row:
                    continue

                result.rows_read += 1
                bid, exact = parse_bid_row(row, reader.line_num, columns, amount)
                if not exact:
                    result.amounts_inexact += 1
                result.bids.append(bid)

    except OSError as e:
        error = SourceFileError(f"Cannot read bid file: {e}", path=csv_path)
        result.errors.append(error)
        logger.error("Failed to open bid file", path=csv_path, error=str(e))

    except csv.Error as e:
        _record_malformed(result, MalformedRowError(str(e), context={"path": csv_path}))

    except DataQualityError as e:
        _record_malformed(result, e)

    logger.info(
        "Bid file loaded",
        path=csv_path,
        count=len(result.bids),
        rows_read=result.rows_read,
        amounts_inexact=result.amounts_inexact
    )
    return result


def _record_malformed(result: LoadResult, error: DataQualityError) -> None:
    result.errors.append(error)
    logger.error(
        "Malformed bid row, load stopped",
        path=result.path,
        error=str(error),
        bids_loaded=len(result.bids)
    )
