"""Least-significant-digit radix sort of unsigned 32-bit integers."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

WORD_BITS = 32
WORD_MAX = (1 << WORD_BITS) - 1
DEFAULT_LOG_BASE = 8


def _check_word(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value <= WORD_MAX:
        raise ValueError(f"{value} is not an unsigned 32-bit integer")
    return value


def radix_sort(values: Iterable[int], log_base: int = DEFAULT_LOG_BASE) -> list[int]:
    """Return the values sorted ascending, one stable bucket pass per digit.

    Each digit is ``log_base`` bits wide; passes run from the lowest digit
    upward until all 32 bits of the word have been covered.
    """
    if log_base < 1:
        raise ValueError("log_base must be at least 1")
    arr = [_check_word(v) for v in values]
    mask = (1 << log_base) - 1
    for shift in range(0, WORD_BITS, log_base):
        buckets: defaultdict[int, list[int]] = defaultdict(list)
        for value in arr:
            buckets[(value >> shift) & mask].append(value)
        arr = [value for digit in sorted(buckets) for value in buckets[digit]]
    return arr