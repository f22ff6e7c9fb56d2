"""GrowthAccumulator — opt-in profiling of buffer reallocations.

This module provides accumulated metrics while buffers grow:
- Number of reallocations
- Total bytes allocated by those reallocations
- Peak capacity reached

Zero overhead when disabled (get_growth_accumulator() returns None).

Example:
    from chesscli.profiling import profiled_growth
    from chesscli.strbuf import StrBuf

    with profiled_growth() as metrics:
        buf = StrBuf()
        buf.append_chars(b"x" * 1000)

    print(metrics.summary())
    # {"total_ms": 0.4, "reallocations": 7, "bytes_allocated": 2032, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class GrowthAccumulator:
    """Accumulated metrics for buffer growth.

    Attributes:
        start_time: Profiling start timestamp.
        reallocations: Number of storage reallocations recorded.
        bytes_allocated: Sum of the new capacities of those reallocations.
        peak_capacity: Largest capacity seen.

    """

    start_time: float = field(default_factory=perf_counter)
    reallocations: int = 0
    bytes_allocated: int = 0
    peak_capacity: int = 0

    def record_realloc(self, old_capacity: int, new_capacity: int) -> None:
        """Record one reallocation.

        Args:
            old_capacity: Capacity before growing.
            new_capacity: Capacity after growing.

        """
        self.reallocations += 1
        self.bytes_allocated += new_capacity
        if new_capacity > self.peak_capacity:
            self.peak_capacity = new_capacity

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of growth metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "reallocations": self.reallocations,
            "bytes_allocated": self.bytes_allocated,
            "peak_capacity": self.peak_capacity,
        }


_accumulator: ContextVar[GrowthAccumulator | None] = ContextVar(
    "growth_accumulator",
    default=None,
)


def get_growth_accumulator() -> GrowthAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_growth() -> Iterator[GrowthAccumulator]:
    """Context manager for profiled buffer growth.

    Creates a GrowthAccumulator and makes it available via
    get_growth_accumulator() for the duration of the with block.

    Yields:
        GrowthAccumulator populated by every reallocation in this context.

    """
    acc = GrowthAccumulator()
    token: Token[GrowthAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
