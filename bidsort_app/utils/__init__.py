"""
Utility functions module.

Processor-time measurement used to report how long loads and sorts take.
Times are reported in clock ticks and in seconds, the way C clock() does.
"""
