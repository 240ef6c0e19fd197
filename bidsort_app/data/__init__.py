"""
Bid data module.

Bid records, the in-memory record store, currency parsing and CSV loading.
"""
