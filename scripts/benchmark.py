#!/usr/bin/env python3
"""Selection sort vs quicksort benchmark for BidSort App."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bidsort_app.sorting.benchmark import compare_sorts, generate_bids


def main():
    """Main benchmark function."""
    print("⚡ BidSort Sorting Benchmark")
    print("=" * 40)

    # Selection sort is quadratic; keep the largest size modest
    test_sizes = [100, 500, 1000, 5000]

    for size in test_sizes:
        bids = generate_bids(size, seed=42)
        results = compare_sorts(bids)

        print(f"\n📊 Results for {size} bids:")
        print(f"   Selection sort: {results.selection.ticks} ticks ({results.selection.seconds:.3f}s)")
        print(f"   Quicksort:      {results.quick.ticks} ticks ({results.quick.seconds:.3f}s)")
        if results.speedup:
            print(f"   Speedup:        {results.speedup:.1f}x")

        if results.titles_match:
            print(f"   ✅ Both sorts agree on title order")
        else:
            print(f"   ❌ Sorts disagree on title order")
            sys.exit(1)


if __name__ == "__main__":
    main()
