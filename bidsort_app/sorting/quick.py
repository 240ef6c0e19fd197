"""
Quicksort over the bid store using Hoare partitioning.

Pending ranges are kept on an explicit work list instead of the call stack.
The larger half of every partition is deferred and the smaller half handled
next, so at most O(log n) ranges are pending even on adversarial input.
"""

from typing import Callable, Optional

import structlog

from ..data.models import Bid, BidStore, title_key
from ..errors import SortRangeError

logger = structlog.get_logger(__name__)


def partition(
    store: BidStore,
    begin: int,
    end: int,
    key: Callable[[Bid], str] = title_key
) -> int:
    """
    Partition store[begin..end] around the key of its middle element.

    Afterwards every bid in [begin, p] has a key <= every key in [p+1, end].
    The pivot key is captured before scanning; the bid it came from may move.

    Args:
        store: Bids to partition
        begin: First index of the range
        end: Last index of the range (inclusive), greater than begin

    Returns:
        Partition boundary p, with begin <= p < end
    """
    pivot = key(store[begin + (end - begin) // 2])
    i = begin - 1
    j = end + 1

    while True:
        i += 1
        while key(store[i]) < pivot:
            i += 1

        j -= 1
        while key(store[j]) > pivot:
            j -= 1

        if i >= j:
            return j

        store.swap(i, j)


def quick_sort(
    store: BidStore,
    begin: int = 0,
    end: Optional[int] = None,
    key: Callable[[Bid], str] = title_key
) -> int:
    """
    Sort store[begin..end] in place by quicksort.

    Average performance: O(n log(n))
    Worst case performance: O(n^2)

    Args:
        store: Bids to sort
        begin: First index to sort
        end: Last index to sort (inclusive), defaults to the last bid
        key: Sort key, bid title by default

    Returns:
        Number of partition passes performed

    Raises:
        SortRangeError: If a non-trivial range falls outside the store
    """
    size = len(store)
    if end is None:
        end = size - 1

    # Ranges of size 0 or 1 are already sorted
    if begin >= end:
        return 0

    if begin < 0 or end >= size:
        raise SortRangeError(
            f"Sort range [{begin}, {end}] outside store of size {size}",
            begin=begin,
            end=end,
            size=size,
        )

    partitions = 0
    pending = [(begin, end)]

    while pending:
        low, high = pending.pop()

        while low < high:
            p = partition(store, low, high, key)
            partitions += 1

            # Left half keeps the boundary index itself
            if p - low < high - p:
                pending.append((p + 1, high))
                high = p
            else:
                pending.append((low, p))
                low = p + 1

    logger.debug("Quicksort finished", size=size, begin=begin, end=end, partitions=partitions)
    return partitions
