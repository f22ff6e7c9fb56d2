"""Capacity policy for StrBuf storage.

Capacities are powers of two, never smaller than two machine words. Growing
by doubling keeps repeated appends amortized O(1).
"""

from __future__ import annotations

import struct

# Size of a pointer on this interpreter's platform.
WORD_SIZE: int = struct.calcsize("P")

MIN_CAPACITY: int = 2 * WORD_SIZE


def capacity_for(n: int) -> int:
    """Return the storage capacity needed to hold n bytes.

    The result is the smallest power of two that is >= n and >= MIN_CAPACITY.

    Examples:
        >>> capacity_for(0) == MIN_CAPACITY
        True
        >>> capacity_for(100)
        128
    """
    p2 = MIN_CAPACITY
    while p2 < n:
        p2 *= 2
    return p2


__all__ = ["MIN_CAPACITY", "WORD_SIZE", "capacity_for"]
