"""
Side-by-side timing of selection sort and quicksort.

Both algorithms run on independent copies of the same input so the
comparison is fair, and their title orders are cross-checked.
"""

import random
from dataclasses import dataclass
from typing import Iterable

from ..data.models import Bid, BidStore
from ..utils.timing import ElapsedTime, timed
from .quick import quick_sort
from .selection import selection_sort

_TITLE_WORDS = (
    "Antique", "Bench", "Cabinet", "Desk", "Drill", "Hammer", "Lamp",
    "Mower", "Printer", "Saw", "Table", "Tractor", "Wrench",
)
_FUNDS = ("Enterprise", "General Fund", "Special Revenue")


@dataclass(frozen=True)
class SortComparison:
    """Timings of both sorts over the same input."""
    size: int
    selection: ElapsedTime
    quick: ElapsedTime
    titles_match: bool      # Both sorts produced the same title order

    @property
    def speedup(self) -> float:
        """How many times faster quicksort ran (0.0 if unmeasurable)."""
        if self.quick.ticks <= 0:
            return 0.0
        return self.selection.ticks / self.quick.ticks


def generate_bids(count: int, seed: int = 42) -> list[Bid]:
    """Generate reproducible synthetic bids for benchmarking."""
    rng = random.Random(seed)
    bids = []
    for i in range(count):
        title = f"{rng.choice(_TITLE_WORDS)} {rng.choice(_TITLE_WORDS)} {rng.randrange(100)}"
        bids.append(Bid(
            bid_id=str(90000 + i),
            title=title,
            fund=rng.choice(_FUNDS),
            amount=round(rng.uniform(1.0, 5000.0), 2),
        ))
    return bids


def compare_sorts(bids: Iterable[Bid]) -> SortComparison:
    """
    Time selection sort and quicksort over the same bids.

    Args:
        bids: Input bids; not modified

    Returns:
        SortComparison with both timings and the cross-check result
    """
    selection_store = BidStore(bids)
    quick_store = selection_store.copy()

    _, selection_time = timed(selection_sort, selection_store)
    _, quick_time = timed(quick_sort, quick_store)

    return SortComparison(
        size=len(selection_store),
        selection=selection_time,
        quick=quick_time,
        titles_match=selection_store.titles() == quick_store.titles(),
    )
