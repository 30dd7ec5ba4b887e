"""Towers of Hanoi solved recursively on three pegs."""

from __future__ import annotations

DEFAULT_DISCS = 7


class TowersError(Exception):
    """A finished puzzle failed verification; ``code`` tells which check."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


class Towers:
    """Three pegs, each a stack whose top is the last list element."""

    def __init__(self, num_discs: int = DEFAULT_DISCS) -> None:
        if num_discs < 1:
            raise ValueError("the puzzle needs at least one disc")
        self.num_discs = num_discs
        self.num_moves = 0
        self.peg_a: list[int] = []
        self.peg_b: list[int] = []
        self.peg_c: list[int] = []
        self._stack_discs()

    def _stack_discs(self) -> None:
        self.num_moves = 0
        self.peg_a = list(range(self.num_discs, 0, -1))
        self.peg_b = []
        self.peg_c = []

    def clear(self) -> None:
        """Put every disc back on the first peg and reset the move count."""
        self._stack_discs()

    def _move(self, n: int, start: list[int], temp: list[int], dest: list[int]) -> None:
        if n == 1:
            dest.append(start.pop())
            self.num_moves += 1
        else:
            self._move(n - 1, start, dest, temp)
            self._move(1, start, temp, dest)
            self._move(n - 1, temp, start, dest)

    def solve(self) -> None:
        """Move the whole stack from the first peg to the third."""
        self._move(self.num_discs, self.peg_a, self.peg_b, self.peg_c)

    def verify(self) -> bool:
        """Return True if solved optimally, else raise TowersError."""
        if self.peg_a:
            raise TowersError("first peg is not empty", 2)
        if self.peg_b:
            raise TowersError("middle peg is not empty", 3)
        if len(self.peg_c) != self.num_discs:
            raise TowersError("last peg does not hold every disc", 4)
        for expected, disc in enumerate(reversed(self.peg_c), start=1):
            if disc != expected:
                raise TowersError("discs on the last peg are out of order", 5)
        if self.num_moves != (1 << self.num_discs) - 1:
            raise TowersError("move count is not minimal", 6)
        return True