"""Small kernels: Fibonacci, ROT13, a counting loop and a ROT13 checksum."""

from __future__ import annotations

from .checksum import MASK32, crc32a

FOX = "The quick brown fox jumps of the lazy dog."


def fib(n: int) -> int:
    """Return the n-th Fibonacci number modulo 2**32."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    a, b = 0, 1
    for _ in range(1, n):
        a, b = b, (a + b) & MASK32
    return b


def _rot13_char(ch: str) -> str:
    if "a" <= ch <= "m" or "A" <= ch <= "M":
        return chr(ord(ch) + 13)
    if "n" <= ch <= "z" or "N" <= ch <= "Z":
        return chr(ord(ch) - 13)
    return ch


def rot13(text: str) -> str:
    """Rotate ASCII letters by 13 places; leave everything else alone."""
    return "".join(_rot13_char(ch) for ch in text)


def counting_loop(limit: int = 10) -> tuple[int, int]:
    """Count up to ``limit``; return the final counter and the running sum."""
    counter = 0
    total = 0
    while counter < limit:
        counter += 1
        total += counter
    return counter, total


def double_rot13_checksum(text: str = FOX) -> int:
    """XOR of the CRC-32 of the rotated text and of the text rotated back."""
    rotated = rot13(text)
    restored = rot13(rotated)
    return crc32a(rotated.encode("utf-8")) ^ crc32a(restored.encode("utf-8"))