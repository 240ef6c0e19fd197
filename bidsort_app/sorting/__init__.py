"""In-place comparison sorts over the bid store"""

from .benchmark import SortComparison, compare_sorts, generate_bids
from .quick import partition, quick_sort
from .selection import selection_sort

__all__ = [
    "selection_sort",
    "quick_sort",
    "partition",
    "compare_sorts",
    "generate_bids",
    "SortComparison",
]
