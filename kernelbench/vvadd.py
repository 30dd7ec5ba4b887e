"""Element-wise sum of two vectors."""

from __future__ import annotations

from collections.abc import Sequence


def vvadd(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the element-wise sum of two equally long vectors."""
    if len(a) != len(b):
        raise ValueError("vectors must have the same length")
    return [x + y for x, y in zip(a, b)]