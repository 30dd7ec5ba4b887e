"""Benchmark kernels (radix sort, Towers of Hanoi, vector add) and simulated debug programs (CRC-32, ROT13, timer traps)."""

__version__ = "0.1.0"