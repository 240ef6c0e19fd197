"""Pytest configuration and shared fixtures."""

import csv
import logging
from pathlib import Path
from typing import Callable, List

import pytest
import structlog

from bidsort_app.data.models import Bid, BidStore

CSV_HEADER = [
    "ArticleTitle", "ArticleID", "Department", "CloseDate", "WinningBid",
    "InventoryID", "VehicleID", "ReceiptNumber", "Fund",
]


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging setup done by main() or run_menu()."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)


def make_row(title: str, bid_id: str, amount: str, fund: str) -> List[str]:
    """Build a full-width eBid export row."""
    return [title, bid_id, "General Services", "11/30/2016", amount, "", "", "", fund]


@pytest.fixture
def make_bids() -> Callable[..., List[Bid]]:
    """Factory building bids from a list of titles."""
    def _make(*titles: str) -> List[Bid]:
        return [
            Bid(bid_id=str(98000 + i), title=title, fund="General Fund", amount=float(i))
            for i, title in enumerate(titles)
        ]
    return _make


@pytest.fixture
def tool_store(make_bids) -> BidStore:
    """Store holding the four-tool example in file order."""
    return BidStore(make_bids("Wrench", "Hammer", "Drill", "Hammer"))


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write rows (with the eBid header) to a CSV file and return its path."""
    def _write(rows: List[List[str]], name: str = "bids.csv", header: bool = True) -> Path:
        path = tmp_path / name
        with open(path, "w", newline="") as f:
            writer = csv.writer(f)
            if header:
                writer.writerow(CSV_HEADER)
            writer.writerows(rows)
        return path
    return _write


@pytest.fixture
def widget_csv(write_csv) -> Path:
    """Three-row file with two identical titles."""
    return write_csv([
        make_row("Widget B", "98101", "$12.50", "General Fund"),
        make_row("Widget A", "98102", "$7.00", "Enterprise"),
        make_row("Widget A", "98103", "$1,250.00", "General Fund"),
    ])
