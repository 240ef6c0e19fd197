"""
Bid record and record store.

Bids are immutable once built. The store owns an ordered sequence of bids
and only ever relocates them: sorting swaps positions, it never edits fields.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Bid:
    """A single eBid auction sale."""
    bid_id: str         # Auction identifier, not guaranteed unique
    title: str          # Item title, the sort key
    fund: str           # Fund the proceeds were credited to
    amount: float = 0.0  # Winning bid in dollars

    def display(self) -> str:
        """Format as `id: title | amount | fund`."""
        return f"{self.bid_id}: {self.title} | {self.amount:g} | {self.fund}"


def title_key(bid: Bid) -> str:
    """Sort key used by both sorting algorithms."""
    return bid.title


class BidStore:
    """Ordered, index-addressable collection of bids."""

    def __init__(self, bids: Iterable[Bid] = ()):
        self._bids: list[Bid] = list(bids)

    def __len__(self) -> int:
        return len(self._bids)

    def __iter__(self) -> Iterator[Bid]:
        return iter(self._bids)

    def __getitem__(self, index: int) -> Bid:
        if index < 0:
            raise IndexError(f"negative index {index} into bid store")
        return self._bids[index]

    def __repr__(self) -> str:
        return f"BidStore(size={len(self._bids)})"

    def replace(self, bids: Iterable[Bid]) -> None:
        """Replace the entire contents, e.g. on reload."""
        self._bids = list(bids)

    def append(self, bid: Bid) -> None:
        """Add a bid to the end of the store."""
        self._bids.append(bid)

    def swap(self, i: int, j: int) -> None:
        """Exchange the bids at two positions."""
        if i == j:
            return
        if i < 0 or j < 0:
            raise IndexError(f"negative index in swap({i}, {j})")
        bids = self._bids
        bids[i], bids[j] = bids[j], bids[i]

    def titles(self) -> list[str]:
        """Titles in current store order."""
        return [bid.title for bid in self._bids]

    def snapshot(self) -> list[Bid]:
        """Shallow copy of the current order."""
        return list(self._bids)

    def copy(self) -> "BidStore":
        """Independent store holding the same bids in the same order."""
        return BidStore(self._bids)
