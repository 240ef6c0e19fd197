"""
Processor-time measurement in clock ticks.

Ticks follow the POSIX clock() convention of one million ticks per second.
Processor time (not wall-clock) is measured so that a sort's reported time
is not inflated while the process waits on the terminal.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

CLOCKS_PER_SEC = 1_000_000

T = TypeVar("T")


def clock() -> int:
    """Current processor time in clock ticks."""
    return time.process_time_ns() // (1_000_000_000 // CLOCKS_PER_SEC)


@dataclass(frozen=True)
class ElapsedTime:
    """Elapsed processor time."""
    ticks: int

    @property
    def seconds(self) -> float:
        """Elapsed time converted from ticks to seconds."""
        return self.ticks * 1.0 / CLOCKS_PER_SEC


class Stopwatch:
    """
    Context manager measuring the processor time of its block.

    Example:
        with Stopwatch() as watch:
            selection_sort(store)
        print(watch.elapsed.ticks)
    """

    def __init__(self):
        self._start: Optional[int] = None
        self.elapsed: Optional[ElapsedTime] = None

    def __enter__(self) -> "Stopwatch":
        self._start = clock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = ElapsedTime(ticks=clock() - self._start)


def timed(func: Callable[..., T], *args: Any, **kwargs: Any) -> tuple[T, ElapsedTime]:
    """
    Call a function and measure how long it took.

    Returns:
        Tuple of (function result, elapsed processor time)
    """
    with Stopwatch() as watch:
        result = func(*args, **kwargs)
    return result, watch.elapsed
