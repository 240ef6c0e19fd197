"""
BidSort App - Bid Vector Sorting Workbench

Loads eBid monthly sales records from a CSV export into memory and compares
selection sort against quicksort over the bid titles, timing each run.
"""

__version__ = "0.1.0"
__author__ = "BidSort Team"
