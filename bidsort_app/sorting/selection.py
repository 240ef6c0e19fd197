"""Selection sort over the bid store"""

from typing import Callable

from ..data.models import Bid, BidStore, title_key


def selection_sort(store: BidStore, key: Callable[[Bid], str] = title_key) -> int:
    """
    Sort the store in place by selection sort.

    Average performance: O(n^2)
    Worst case performance: O(n^2)

    Each pass finds the smallest key in the unsorted suffix and swaps it into
    place. Not stable.

    Args:
        store: Bids to sort
        key: Sort key, bid title by default

    Returns:
        Number of swaps performed
    """
    size = len(store)
    swaps = 0

    # i divides the sorted prefix from the unsorted suffix
    for i in range(size - 1):
        min_index = i
        min_key = key(store[i])

        for j in range(i + 1, size):
            candidate = key(store[j])
            if candidate < min_key:
                min_index = j
                min_key = candidate

        if min_index != i:
            store.swap(i, min_index)
            swaps += 1

    return swaps
