"""Bitwise CRC-32 that follows the shift-register circuit one bit at a time."""

from __future__ import annotations

MASK32 = 0xFFFFFFFF
POLYNOMIAL = 0x04C11DB7


def reverse_bits(x: int) -> int:
    """Return the 32-bit word with its bit order reversed."""
    if not 0 <= x <= MASK32:
        raise ValueError(f"{x} is not a 32-bit word")
    x = ((x & 0x55555555) << 1) | ((x >> 1) & 0x55555555)
    x = ((x & 0x33333333) << 2) | ((x >> 2) & 0x33333333)
    x = ((x & 0x0F0F0F0F) << 4) | ((x >> 4) & 0x0F0F0F0F)
    x = ((x << 24) | ((x & 0xFF00) << 8) | ((x >> 8) & 0xFF00) | (x >> 24)) & MASK32
    return x


def crc32a(message: bytes | bytearray | memoryview) -> int:
    """Return the CRC-32 of the message."""
    crc = MASK32
    for byte in bytes(message):
        bits = reverse_bits(byte)
        for _ in range(8):
            if (crc ^ bits) & 0x80000000:
                crc = ((crc << 1) ^ POLYNOMIAL) & MASK32
            else:
                crc = (crc << 1) & MASK32
            bits = (bits << 1) & MASK32
    return reverse_bits(~crc & MASK32)